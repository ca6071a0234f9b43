import time

from life.game_logic import step
from life.models import Board, DEFAULT_CONFIG, logger
from life.renderer import FrameCanvas, draw, clear

STOPPED = 'stopped'
PLAYING = 'playing'

DEFAULT_GAME_ID = 'default'


class AnimationController:
    """Owns one board and drives it through the stopped/playing states.

    Nothing here schedules itself. The host calls ``advance()`` from its
    animation-frame callback and the controller decides whether a tick is due.
    """

    def __init__(self, config=None, rng=None, canvas=None, clock=time.monotonic, game_id=None):
        self.config = config if config is not None else DEFAULT_CONFIG.copy()
        self.id = game_id or DEFAULT_GAME_ID
        self.fps = self.config['fps']
        self.clock = clock
        self.board = Board.from_config(self.config, rng=rng)
        self.canvas = canvas if canvas is not None else FrameCanvas(self.board.width, self.board.height)
        self.is_playing = False
        self.cleared = False
        self.last_tick = None

        self.board.init()
        draw(self.board, self.canvas)

    @property
    def state(self):
        return PLAYING if self.is_playing else STOPPED

    @property
    def interval(self):
        """Seconds between two ticks."""
        return 1.0 / self.fps

    def play(self):
        if not self.is_playing:
            self.is_playing = True
            # The first frame after play ticks straight away
            self.last_tick = None
            logger.info(f"Game {self.id} playing at {self.fps} fps")

    def pause(self):
        if self.is_playing:
            self.is_playing = False
            logger.info(f"Game {self.id} paused at generation {self.board.generation}")

    def restart(self):
        """Stop, clear the canvas and start again from fresh random cells."""
        self.pause()
        clear(self.canvas, self.board.width, self.board.height)
        self.cleared = True
        self.board.init()
        draw(self.board, self.canvas)
        logger.info(f"Game {self.id} restarted with {self.board.population} live cells")

    def tick(self):
        """Advance one generation and redraw."""
        step(self.board)
        draw(self.board, self.canvas)

    def advance(self, now=None):
        """Tick once if playing and the frame interval has passed.

        Returns:
            The number of ticks performed (0 or 1).
        """
        if not self.is_playing:
            return 0

        if now is None:
            now = self.clock()
        if self.last_tick is not None and now - self.last_tick < self.interval:
            return 0

        self.tick()
        self.last_tick = now
        return 1

    def redraw(self):
        draw(self.board, self.canvas)

    def frame(self):
        """Return a JSON-serialisable snapshot along with the pending draw calls."""
        frame = {
            'id': self.id,
            'state': self.state,
            'generation': self.board.generation,
            'population': self.board.population,
            'rows': self.board.column_length,
            'cols': self.board.row_length,
            'cell_size': self.board.cell_size,
            'width': self.board.width,
            'height': self.board.height,
            'fps': self.fps,
            'cleared': self.cleared,
            'operations': self.canvas.flush()
        }
        self.cleared = False
        return frame
