from life.models import Board


class FakeClock:
    def __init__(self):
        self.value = 100.0

    def advance(self, amount):
        self.value += amount

    def __call__(self):
        return self.value


def make_board(rows, cols, alive=()):
    """Board of 1px cells with only the given positions alive."""
    board = Board(width=cols, height=rows, cells_per_row=cols, density=0.0, seed=0)
    board.init()
    return board.set_pattern(alive)


def alive_positions(board):
    return {cell.position for row in board.cells for cell in row if cell.alive}
