"""Configuration management for the Larder application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
BASE_DIR: Final[Path] = Path(__file__).parent.parent
_env_path = BASE_DIR / '.env'
if _env_path.exists():
    load_dotenv(_env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Storage
DATA_DIR: Final[Path] = Path(os.getenv('LARDER_DATA_DIR', str(BASE_DIR / 'data'))).expanduser().resolve()

# Kitchen alerts: remaining quantity at or below this publishes kitchen.low_stock (0 disables)
LOW_STOCK_THRESHOLD: Final[int] = int(os.getenv('LOW_STOCK_THRESHOLD', '1'))

# Recent events kept for GET /api/events
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '300'))
