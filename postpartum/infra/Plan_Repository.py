"""Daily plan repository: persists the single cached plan."""
import logging
from pathlib import Path
from typing import Optional

from postpartum.domain.DailyPlan import DailyPlan
from postpartum.infra.json_store import read_json, write_json, remove_json
from postpartum.infra.paths import PLAN_FILE

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else PLAN_FILE

    def load(self) -> Optional[DailyPlan]:
        data = read_json(self.path)
        if data is None:
            return None
        try:
            return DailyPlan.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid cached plan in {self.path}, ignoring it: {e}")
            return None

    def save(self, plan: DailyPlan) -> None:
        write_json(self.path, plan.to_dict())

    def clear(self) -> None:
        remove_json(self.path)
