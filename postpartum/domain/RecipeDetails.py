"""RecipeDetails domain entity: how to cook one dish of the plan."""
from dataclasses import dataclass, field
from typing import Tuple


def _text_list(value) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if v is not None)
    return ()


@dataclass(frozen=True)
class RecipeDetails:
    ingredients: Tuple[str, ...] = field(default_factory=tuple)
    steps: Tuple[str, ...] = field(default_factory=tuple)
    tips: Tuple[str, ...] = field(default_factory=tuple)
    nutrition_highlights: str = ""

    @classmethod
    def unavailable(cls) -> "RecipeDetails":
        '''Placeholder shown when the recipe could not be loaded.'''
        return cls(
            ingredients=("Failed to load",),
            steps=("Please check the network and try again",),
        )

    @staticmethod
    def from_dict(data):
        d = dict(data)
        highlights = d.get('nutrition_highlights', d.get('nutritionHighlights', ''))
        return RecipeDetails(
            ingredients=_text_list(d.get('ingredients')),
            steps=_text_list(d.get('steps')),
            tips=_text_list(d.get('tips')),
            nutrition_highlights=str(highlights or ''),
        )

    def to_dict(self):
        return {
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "tips": list(self.tips),
            "nutrition_highlights": self.nutrition_highlights,
        }
