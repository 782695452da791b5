"""Phase classifier: which of the three program stages a day belongs to."""
from dataclasses import dataclass

from postpartum.utilities.constants import PHASES, PHASE_ONE_LAST_DAY, PHASE_TWO_LAST_DAY


@dataclass(frozen=True)
class Phase:
    number: int
    name: str
    focus: str


def classify(day: int) -> Phase:
    """Total over all integers; range clamping is the caller's job."""
    if day <= PHASE_ONE_LAST_DAY:
        number = 1
    elif day <= PHASE_TWO_LAST_DAY:
        number = 2
    else:
        number = 3
    info = PHASES[number]
    return Phase(number=number, name=info["name"], focus=info["focus"])


__all__ = ['Phase', 'classify']
