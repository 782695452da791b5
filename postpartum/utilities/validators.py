"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal
from datetime import date

from postpartum.domain.Settings import Settings


class SettingsInput(BaseModel):
    """Schema for a full settings replacement."""
    start_date: date
    dislikes: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    lactation_support: bool = True
    senior_mode: bool = False

    @field_validator('dislikes', 'allergies')
    @classmethod
    def strip_terms(cls, v):
        """Drop blank entries and surrounding whitespace."""
        return [term.strip() for term in v if term and term.strip()]

    def to_settings(self) -> Settings:
        return Settings(
            start_date=self.start_date,
            dislikes=tuple(self.dislikes),
            allergies=tuple(self.allergies),
            lactation_support=self.lactation_support,
            senior_mode=self.senior_mode,
        )


class ShoppingListRequest(BaseModel):
    """Schema for generating a shopping list."""
    days: Literal[1, 3, 7] = 3

