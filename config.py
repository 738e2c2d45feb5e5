"""Application configuration."""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"

# Ensure directories exist
DATA_DIR.mkdir(exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'dashboard.db'}")

# Listing defaults (items per page input is clamped into [MIN, MAX])
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# Catalog quality score at or above this is highlighted on the metrics page
QUALITY_SCORE_HIGHLIGHT = 80.0

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level() -> int:
    """Return the numeric level for LOG_LEVEL, defaulting to INFO."""
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


# App settings
APP_TITLE = os.getenv("APP_TITLE", "Seller Scan Dashboard")
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
