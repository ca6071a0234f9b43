import numpy as np

from life.models import logger


def update_living_neighbours(board):
    """Count the live neighbours of every cell in the current generation.

    This must run over the whole board before any cell changes state.
    """
    cells = board.cells
    for row in cells:
        for cell in row:
            cell.living_neighbours = sum(1 for n_row, n_col in cell.neighbours if cells[n_row][n_col].alive)


def update_alive_status(board):
    """Apply the survival, birth and death rules using the stored counts."""
    for row in board.cells:
        for cell in row:
            if cell.alive:
                # Survives with two or three neighbours, otherwise dies
                cell.alive = cell.living_neighbours in (2, 3)
            elif cell.living_neighbours == 3:
                cell.alive = True


def step(board):
    """Advance the board by one generation and return it."""
    update_living_neighbours(board)
    update_alive_status(board)
    board.generation += 1
    logger.debug(f"Advanced board to generation {board.generation}")
    return board


def count_neighbours_array(grid):
    """Count live neighbours of a 0/1 grid without wrapping at the edges."""
    binary_grid = (np.asarray(grid) > 0).astype(np.int8)
    padded = np.pad(binary_grid, 1, mode='constant')
    rows, cols = binary_grid.shape

    neighbours = np.zeros_like(binary_grid)
    for i in range(-1, 2):
        for j in range(-1, 2):
            if i == 0 and j == 0:
                continue
            neighbours += padded[1 + i:1 + i + rows, 1 + j:1 + j + cols]
    return neighbours


def next_generation_array(grid):
    """Return the next generation of a 0/1 grid as a new uint8 array."""
    alive = np.asarray(grid) > 0
    neighbours = count_neighbours_array(grid)

    survives = alive & ((neighbours == 2) | (neighbours == 3))
    born = ~alive & (neighbours == 3)
    return (survives | born).astype(np.uint8)
