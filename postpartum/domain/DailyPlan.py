"""DailyPlan domain entity: the meals generated for one program day."""
from dataclasses import dataclass, field
from typing import List, Tuple

from postpartum.domain.Meal import Meal


@dataclass(frozen=True)
class DailyPlan:
    day: int
    phase: str
    meals: Tuple[Meal, ...] = field(default_factory=tuple)

    def meal_names(self) -> List[str]:
        return [m.name for m in self.meals]

    def __str__(self) -> str:
        return f"Day {self.day} ({self.phase}) - {len(self.meals)} meals"

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return DailyPlan(
            day=int(d['day']),
            phase=d.get('phase', ''),
            meals=tuple(Meal.from_dict(m) for m in d.get('meals', [])),
        )

    def to_dict(self):
        return {
            "day": self.day,
            "phase": self.phase,
            "meals": [m.to_dict() for m in self.meals],
        }
