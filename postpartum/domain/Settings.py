"""Settings value: program start date, food exclusions and soft preferences."""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Optional, Tuple


def _clean_terms(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    '''Strip, drop blanks and duplicates while keeping first-seen order.'''
    seen = []
    for v in values or ():
        term = str(v).strip()
        if term and term not in seen:
            seen.append(term)
    return tuple(seen)


def _parse_flag(value, default: bool) -> bool:
    '''Stored flags may come back as strings ("false"); anything unrecognised keeps the default.'''
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
    return default


def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept both "YYYY-MM-DD" and full ISO timestamps
    return date.fromisoformat(str(value)[:10])


@dataclass(frozen=True)
class Settings:
    start_date: date
    dislikes: Tuple[str, ...] = field(default_factory=tuple)
    allergies: Tuple[str, ...] = field(default_factory=tuple)
    lactation_support: bool = True
    senior_mode: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'start_date', _parse_date(self.start_date))
        object.__setattr__(self, 'dislikes', _clean_terms(self.dislikes))
        object.__setattr__(self, 'allergies', _clean_terms(self.allergies))

    @classmethod
    def default(cls, today: Optional[date] = None) -> "Settings":
        '''First-run settings: program starts today, lactation support on.'''
        return cls(start_date=today or date.today())

    def updated(self, **changes) -> "Settings":
        return replace(self, **changes)

    @staticmethod
    def from_dict(data, today: Optional[date] = None) -> "Settings":
        '''Creates Settings from a dictionary; missing keys fall back to defaults.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Settings(
            start_date=d.get('start_date') or (today or date.today()),
            dislikes=d.get('dislikes') or (),
            allergies=d.get('allergies') or (),
            lactation_support=_parse_flag(d.get('lactation_support'), True),
            senior_mode=_parse_flag(d.get('senior_mode'), False),
        )

    def to_dict(self):
        return {
            "start_date": self.start_date.isoformat(),
            "dislikes": list(self.dislikes),
            "allergies": list(self.allergies),
            "lactation_support": self.lactation_support,
            "senior_mode": self.senior_mode,
        }
