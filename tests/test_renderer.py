from life.models import Cell
from life.renderer import DEAD_COLOR, FrameCanvas, cell_color, clear, draw
from tests.helpers import make_board


def test_dead_cells_use_background_color():
    assert cell_color(Cell((3, 4), 8, (), alive=False)) == DEAD_COLOR


def test_live_cell_color_depends_on_position():
    first = cell_color(Cell((0, 0), 8, (), alive=True))
    second = cell_color(Cell((2, 5), 8, (), alive=True))

    assert first == 'hsla(0, 80%, 80%, 1)'
    assert second == 'hsla(22, 80%, 80%, 1)'
    assert DEAD_COLOR not in (first, second)


def test_draw_paints_background_then_live_cells():
    board = make_board(4, 4, {(1, 2), (3, 0)})
    canvas = FrameCanvas(board.width, board.height)

    draw(board, canvas)

    assert canvas.flush() == [
        ['fill', 0, 0, 4, 4, DEAD_COLOR],
        ['fill', 2, 1, 1, 1, 'hsla(9, 80%, 80%, 1)'],
        ['fill', 0, 3, 1, 1, 'hsla(3, 80%, 80%, 1)'],
    ]


def test_draw_uses_cell_size_for_rectangles():
    from life.models import Board

    board = Board(width=80, height=80, cells_per_row=10, seed=0).set_pattern([(2, 3)])
    canvas = FrameCanvas(board.width, board.height)

    draw(board, canvas)

    assert canvas.flush()[1][:5] == ['fill', 24, 16, 8, 8]


def test_full_canvas_fill_drops_older_operations():
    canvas = FrameCanvas(10, 10)
    canvas.fill_rect(1, 1, 2, 2, 'red')
    clear(canvas, 10, 10)

    canvas.fill_rect(0, 0, 10, 10, DEAD_COLOR)

    assert canvas.operations == [['fill', 0, 0, 10, 10, DEAD_COLOR]]


def test_clear_records_clear_rect():
    canvas = FrameCanvas(10, 10)

    clear(canvas, 10, 10)

    assert canvas.flush() == [['clear', 0, 0, 10, 10]]
    assert canvas.operations == []
