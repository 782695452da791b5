"""ShoppingList aggregate: categorized checklist of ingredients for the coming days."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Tuple

from postpartum.utilities.constants import SHOPPING_CATEGORIES, FALLBACK_CATEGORY


def normalize_category(value) -> str:
    '''Map a free-form category onto one of the fixed categories (case-insensitive).'''
    if isinstance(value, str):
        wanted = value.strip().lower()
        for category in SHOPPING_CATEGORIES:
            if category.lower() == wanted:
                return category
    return FALLBACK_CATEGORY


@dataclass(frozen=True)
class ShoppingItem:
    name: str
    amount: str = ""
    category: str = FALLBACK_CATEGORY
    checked: bool = False

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name} - {self.amount} ({self.category})"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingItem(
            name=str(d.get('name', '')),
            amount=str(d.get('amount') or ''),
            category=normalize_category(d.get('category')),
            checked=bool(d.get('checked', False)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "category": self.category,
            "checked": self.checked,
        }


@dataclass(frozen=True)
class ShoppingList:
    generated_at: datetime
    days_covered: int
    items: Tuple[ShoppingItem, ...] = field(default_factory=tuple)

    def with_items(self, items) -> "ShoppingList":
        return replace(self, items=tuple(items))

    def grouped(self) -> Dict[str, List[Tuple[int, ShoppingItem]]]:
        '''
        Items bucketed by category (fixed category order, empty buckets omitted).
        Each entry keeps the item's index in the flat list so a grouped view can still toggle it.
        '''
        groups: Dict[str, List[Tuple[int, ShoppingItem]]] = {c: [] for c in SHOPPING_CATEGORIES}
        for index, item in enumerate(self.items):
            groups.setdefault(item.category, []).append((index, item))
        return {c: entries for c, entries in groups.items() if entries}

    def remaining(self) -> int:
        return sum(1 for i in self.items if not i.checked)

    def __str__(self) -> str:
        return f"Shopping List ({self.days_covered} days, {len(self.items)} items, {self.remaining()} to buy)"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingList(
            generated_at=datetime.fromisoformat(d['generated_at']),
            days_covered=int(d.get('days_covered', 1)),
            items=tuple(ShoppingItem.from_dict(i) for i in d.get('items', [])),
        )

    def to_dict(self):
        return {
            "generated_at": self.generated_at.isoformat(),
            "days_covered": self.days_covered,
            "items": [i.to_dict() for i in self.items],
        }
