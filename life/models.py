import logging
import os

import numpy as np

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    'width': 800,
    'height': 800,
    'cells_per_row': 100,
    'fps': 5,
    'density': 0.1,
    'seed': None,
    'host': '0.0.0.0',
    'port': 5000
}

# Row/column offsets to move from a cell in each direction (N, NE, E, SE, S, SW, W, NW)
DIRECTIONS = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


def build_config(overrides=None, env=None):
    """Build a game configuration from the defaults.

    Args:
        overrides: A dictionary of values to apply on top of the defaults.
            Keys with a value of None are ignored.
        env: Mapping to read PORT from. Defaults to os.environ.

    Returns:
        A new configuration dictionary.

    Raises:
        ValueError: If a value is out of range.
    """
    if env is None:
        env = os.environ

    config = DEFAULT_CONFIG.copy()

    # The listen port is the only setting taken from the environment
    port = env.get('PORT')
    if port:
        try:
            config['port'] = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    validate_config(config)
    return config


def validate_config(config):
    """Raise ValueError if the configuration cannot produce a board."""
    for key in ('width', 'height', 'cells_per_row', 'fps', 'port'):
        if config[key] <= 0:
            raise ValueError(f"{key} must be positive, got {config[key]}")
    if not 0.0 <= config['density'] <= 1.0:
        raise ValueError(f"density must be between 0 and 1, got {config['density']}")
    if config['width'] < config['cells_per_row']:
        raise ValueError("width must be at least cells_per_row so cells are one pixel or larger")
    if config['height'] < config['width'] // config['cells_per_row']:
        raise ValueError("height must fit at least one row of cells")


class Cell:
    """A single cell on the board."""

    def __init__(self, position, size, neighbours, alive=False):
        self.alive = alive
        self.neighbours = neighbours
        self.living_neighbours = 0
        self.position = position
        self.size = size

    def __repr__(self):
        return f"Cell(position={self.position}, alive={self.alive})"


class Board:
    """A fixed-size grid of cells.

    The dimensions and the neighbour table are computed once here. ``init()``
    only replaces the cells, so a restart never changes the shape of the board.
    """

    def __init__(self, width, height, cells_per_row, density=0.1, rng=None, seed=None):
        if rng is None:
            rng = np.random.default_rng(seed)
        self.rng = rng
        self.density = density

        # Amount of cells each row contains
        self.row_length = cells_per_row
        # Size of an individual cell in pixels
        self.cell_size = width // cells_per_row
        # Amount of cells each column contains
        self.column_length = height // self.cell_size

        self.width = self.row_length * self.cell_size
        self.height = self.column_length * self.cell_size
        self.generation = 0
        self.cells = []

        self._neighbours = tuple(
            tuple(self.get_neighbours(row, col) for col in range(self.row_length))
            for row in range(self.column_length)
        )

    @classmethod
    def from_config(cls, config, rng=None):
        return cls(config['width'], config['height'], config['cells_per_row'],
                   density=config['density'], rng=rng, seed=config.get('seed'))

    @property
    def shape(self):
        return self.column_length, self.row_length

    @property
    def get_cell_count(self):
        """Area of the board in cells."""
        return self.row_length * self.column_length

    @property
    def population(self):
        return sum(cell.alive for row in self.cells for cell in row)

    def init(self):
        """Recreate every cell with a fresh random alive state."""
        alive = self.rng.random(self.shape) < self.density
        self.cells = [
            [Cell((row, col), self.cell_size, self._neighbours[row][col], bool(alive[row, col]))
             for col in range(self.row_length)]
            for row in range(self.column_length)
        ]
        self.generation = 0
        return self

    def is_in_bounds(self, row, col):
        """Return whether a given position is on the board."""
        return 0 <= row < self.column_length and 0 <= col < self.row_length

    def get_neighbours(self, row, col):
        """Return the in-bounds neighbour positions of a cell, as a tuple."""
        return tuple(
            (row + d_row, col + d_col)
            for d_row, d_col in DIRECTIONS
            if self.is_in_bounds(row + d_row, col + d_col)
        )

    def set_pattern(self, alive_positions):
        """Kill every cell, then bring the given (row, col) positions to life.

        Cells are created first if the board was never initialised.
        """
        if not self.cells:
            self.init()
        for row in self.cells:
            for cell in row:
                cell.alive = False
                cell.living_neighbours = 0
        for row, col in alive_positions:
            if not self.is_in_bounds(row, col):
                raise ValueError(f"Position {(row, col)} is outside the {self.shape} board")
            self.cells[row][col].alive = True
        self.generation = 0
        return self

    def to_array(self):
        """Return the alive states as a uint8 numpy array (1 = alive)."""
        grid = np.zeros(self.shape, dtype=np.uint8)
        for row in self.cells:
            for cell in row:
                if cell.alive:
                    grid[cell.position] = 1
        return grid
