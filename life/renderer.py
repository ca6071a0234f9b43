DEAD_COLOR = 'hsla(240, 30%, 20%, 100%)'


def cell_color(cell):
    """Colour for a cell; live cells get a hue derived from their position."""
    if not cell.alive:
        return DEAD_COLOR
    row, col = cell.position
    return f'hsla({row + col * 4}, 80%, 80%, 1)'


def draw(board, canvas):
    """Draw every cell of the board onto the canvas.

    The background is painted in the dead colour in one call, then each live
    cell is painted on top of it. The resulting pixels are the same as filling
    every cell individually.
    """
    canvas.fill_rect(0, 0, board.width, board.height, DEAD_COLOR)
    for row in board.cells:
        for cell in row:
            if cell.alive:
                cell_row, cell_col = cell.position
                canvas.fill_rect(cell_col * cell.size, cell_row * cell.size, cell.size, cell.size, cell_color(cell))


def clear(canvas, width, height):
    canvas.clear_rect(0, 0, width, height)


class FrameCanvas:
    """Canvas surface that records draw calls so a browser can replay them.

    Calls are stored as lists in the form the page's script expects:
    ``['fill', x, y, w, h, style]`` and ``['clear', x, y, w, h]``.
    A fill covering the whole canvas hides everything before it, so earlier
    calls are dropped at that point.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.operations = []

    def fill_rect(self, x, y, w, h, style):
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.operations = []
        self.operations.append(['fill', x, y, w, h, style])

    def clear_rect(self, x, y, w, h):
        self.operations.append(['clear', x, y, w, h])

    def flush(self):
        """Return the recorded calls and start a new recording."""
        operations, self.operations = self.operations, []
        return operations
