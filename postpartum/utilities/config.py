"""Configuration management for the postpartum meal program."""
import os
import logging
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, '').strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number", name, raw)
        return None


# Content generator (any OpenAI-compatible chat completions endpoint)
# DS_API_KEY wins; API_KEY is accepted for setups that just swap the key in place
GENERATOR_API_KEY: Final[str] = os.getenv('DS_API_KEY') or os.getenv('API_KEY', '')
GENERATOR_BASE_URL: Final[str] = os.getenv('GENERATOR_BASE_URL', 'https://api.deepseek.com')
GENERATOR_MODEL: Final[str] = os.getenv('GENERATOR_MODEL', 'deepseek-chat')
GENERATOR_TEMPERATURE: Final[float] = float(os.getenv('GENERATOR_TEMPERATURE', '1.0'))
GENERATOR_TIMEOUT: Final[Optional[float]] = _optional_float('GENERATOR_TIMEOUT')

# Shopping list aggregation: keep the days that loaded when some fail
AGGREGATE_PARTIAL_RESULTS: Final[bool] = os.getenv('AGGREGATE_PARTIAL_RESULTS', 'False').lower() == 'true'

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data'))).resolve()
