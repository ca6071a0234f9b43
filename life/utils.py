import sys
from pathlib import Path

from life.models import logger

BASE_DIR = Path(__file__).resolve().parent

# Files the page cannot work without, relative to the package directory
REQUIRED_FILES = (
    Path('templates') / 'index.html',
    Path('public') / 'css' / 'index.css',
    Path('public') / 'javascript' / 'index.js',
)


def handle_exit(signum, frame):
    """Handle exit signals."""
    logger.info(f"Received signal {signum}, shutting down")
    sys.exit(0)  # Exit gracefully


def get_directories(base_dir=BASE_DIR):
    """Return the templates and public directories of the package."""
    base_dir = Path(base_dir)
    return base_dir / 'templates', base_dir / 'public'


def ensure_template_files(base_dir=BASE_DIR):
    """Ensure that the template and static files exist."""
    base_dir = Path(base_dir)
    for relative_path in REQUIRED_FILES:
        path = base_dir / relative_path
        if not path.exists():
            raise FileNotFoundError(f"File {path} not found. Please create it first.")
