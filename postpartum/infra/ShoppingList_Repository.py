"""Shopping list repository: persists the latest generated list."""
import logging
from pathlib import Path
from typing import Optional

from postpartum.domain.ShoppingList import ShoppingList
from postpartum.infra.json_store import read_json, write_json, remove_json
from postpartum.infra.paths import SHOPPING_LIST_FILE

logger = logging.getLogger(__name__)


class ShoppingListRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else SHOPPING_LIST_FILE

    def load(self) -> Optional[ShoppingList]:
        data = read_json(self.path)
        if data is None:
            return None
        try:
            return ShoppingList.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid shopping list in {self.path}, ignoring it: {e}")
            return None

    def save(self, shopping_list: ShoppingList) -> None:
        write_json(self.path, shopping_list.to_dict())

    def clear(self) -> None:
        remove_json(self.path)
