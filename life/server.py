from flask import Flask, render_template, jsonify, request

from life.controller import AnimationController
from life.models import build_config, logger
from life.utils import ensure_template_files, get_directories


def create_app(config=None):
    """Create the Flask app serving the page, its assets and the game controls.

    Each app owns exactly one AnimationController, built from ``config``.

    Args:
        config: A configuration dictionary as returned by build_config.
            Built from the defaults and the environment if None.

    Returns:
        The Flask application.
    """
    if config is None:
        config = build_config()

    templates_dir, public_dir = get_directories()
    app = Flask(__name__,
                template_folder=str(templates_dir),
                static_folder=str(public_dir),
                static_url_path='/public')
    app.config['LIFE'] = config
    app.config['LIFE_GAME'] = AnimationController(config)

    def requested_id():
        """Game ID from the query string or the JSON body, if any."""
        game_id = request.args.get('id')
        if game_id is None and request.is_json:
            data = request.get_json(silent=True)
            if isinstance(data, dict):
                game_id = data.get('id')
        return game_id or None

    def current_game():
        """The app's controller, or None if the request names another game."""
        game = app.config['LIFE_GAME']
        game_id = requested_id()
        if game_id is not None and game_id != game.id:
            return None
        return game

    def game_not_found():
        return jsonify({'error': 'Game not found', 'id': requested_id()}), 404

    @app.route('/')
    def index():
        """Render the main page."""
        game = app.config['LIFE_GAME']

        return render_template('index.html',
                               config=config,
                               width=game.board.width,
                               height=game.board.height,
                               fps=game.fps,
                               game_id=game.id)

    @app.route('/api/frame')
    def get_frame():
        """Get the whole board without advancing the game."""
        game = current_game()
        if game is None:
            return game_not_found()

        game.redraw()
        return jsonify(game.frame())

    @app.route('/api/advance', methods=['POST'])
    def advance():
        """Called from the page's animation-frame loop; ticks when one is due."""
        game = current_game()
        if game is None:
            return game_not_found()

        ticked = game.advance()
        frame = game.frame()
        frame['ticked'] = ticked
        return jsonify(frame)

    @app.route('/api/play', methods=['POST'])
    def play():
        game = current_game()
        if game is None:
            return game_not_found()

        game.play()
        return jsonify({'status': 'playing', 'id': game.id, 'state': game.state})

    @app.route('/api/pause', methods=['POST'])
    def pause():
        game = current_game()
        if game is None:
            return game_not_found()

        game.pause()
        return jsonify({'status': 'paused', 'id': game.id, 'state': game.state})

    @app.route('/api/restart', methods=['POST'])
    def restart():
        """Stop the game and start again from a new random board."""
        game = current_game()
        if game is None:
            return game_not_found()

        game.restart()
        return jsonify(game.frame())

    return app


def start_web_server(config=None, debug=False):
    """Start the Flask web server."""
    if config is None:
        config = build_config()

    # Ensure the template and static files exist
    ensure_template_files()

    app = create_app(config)
    logger.info(f"Listening on port:{config['port']}")
    app.run(host=config['host'], port=config['port'], debug=debug, threaded=False)
