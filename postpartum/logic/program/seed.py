"""Deterministic seeds for generator requests.

Identical semantic input (same start date and program day, same dish name,
same meal list) must give the same seed on every device and every run, so the
generator reproduces the same content.
"""

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _utf16_code_units(text: str):
    raw = text.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def seed(text: str) -> int:
    """Rolling 31-multiplier hash over UTF-16 code units, wrapped to signed 32 bits, then made non-negative."""
    h = 0
    for unit in _utf16_code_units(text):
        h = (h * 31 + unit) & _MASK
    if h & _SIGN_BIT:
        h -= 1 << 32
    return abs(h)


def daily_plan_seed_text(start_date, day: int) -> str:
    return f"{start_date.isoformat()}-Day-{day}"


def daily_plan_seed(start_date, day: int) -> int:
    return seed(daily_plan_seed_text(start_date, day))


__all__ = ['seed', 'daily_plan_seed', 'daily_plan_seed_text']
