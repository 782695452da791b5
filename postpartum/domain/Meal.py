"""Meal domain entity: one generated dish for one slot of a program day."""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

Number = Union[int, float]


def meal_id(day: int, index: int, seed: int) -> str:
    '''Composite id, stable for (day, index, seed); not unique across days.'''
    return f"{day}-{index}-{seed}"


@dataclass(frozen=True)
class Meal:
    id: str
    name: str
    type: str
    description: str = ""
    calories: Optional[Number] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    is_completed: bool = False

    def __str__(self) -> str:
        kcal = f" - {self.calories} kcal" if self.calories is not None else ""
        tags = f" - Tags: {', '.join(self.tags)}" if self.tags else ""
        return f"[{self.type}] {self.name}{kcal}{tags}"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Meal(
            id=str(d.get('id', '')),
            name=d.get('name', ''),
            type=d.get('type', ''),
            description=d.get('description') or '',
            calories=d.get('calories'),
            tags=tuple(d.get('tags') or ()),
            is_completed=bool(d.get('is_completed', False)),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "calories": self.calories,
            "tags": list(self.tags),
            "is_completed": self.is_completed,
        }
