"""Settings repository (file persistence)."""
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from postpartum.domain.Settings import Settings
from postpartum.infra.json_store import read_json, write_json
from postpartum.infra.paths import SETTINGS_FILE

logger = logging.getLogger(__name__)


class SettingsRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else SETTINGS_FILE

    def load(self, today: Optional[date] = None) -> Settings:
        """Stored settings, or first-run defaults when none are stored."""
        data = read_json(self.path)
        if data is None:
            return Settings.default(today)
        try:
            return Settings.from_dict(data, today=today)
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid settings in {self.path}, using defaults: {e}")
            return Settings.default(today)

    def save(self, settings: Settings) -> None:
        write_json(self.path, settings.to_dict())
