from fastapi import APIRouter, Depends

from postpartum.api.dependencies import get_session
from postpartum.logic.session import ProgramSession

router = APIRouter(prefix="/api", tags=["plan"])


def _day_state(session: ProgramSession):
    phase = session.phase
    return {
        "current_day": session.current_day,
        "viewing_day": session.viewing_day,
        "is_today": session.is_viewing_today,
        "phase": {"number": phase.number, "name": phase.name, "focus": phase.focus},
    }


# -------------------- Day navigation --------------------
@router.get("/day")
def day_state(session: ProgramSession = Depends(get_session)):
    return _day_state(session)


@router.post("/day/next")
def next_day(session: ProgramSession = Depends(get_session)):
    session.next_day()
    return _day_state(session)


@router.post("/day/previous")
def previous_day(session: ProgramSession = Depends(get_session)):
    session.previous_day()
    return _day_state(session)


@router.post("/day/today")
def back_to_today(session: ProgramSession = Depends(get_session)):
    session.back_to_today()
    return _day_state(session)


@router.put("/day/{day}")
def jump_to_day(day: int, session: ProgramSession = Depends(get_session)):
    """Out-of-range days are clamped to the program, never rejected."""
    session.jump_to_day(day)
    return _day_state(session)


# -------------------- Daily plan --------------------
@router.get("/plan")
async def viewing_day_plan(session: ProgramSession = Depends(get_session)):
    plan = await session.load_plan()
    return plan.to_dict()


@router.post("/plan/refresh")
async def refresh_plan(session: ProgramSession = Depends(get_session)):
    plan = await session.load_plan(force=True)
    return plan.to_dict()


@router.get("/recipes/{dish_name}")
async def recipe_details(dish_name: str, session: ProgramSession = Depends(get_session)):
    details = await session.recipe_details(dish_name)
    return {"dish": dish_name, **details.to_dict()}
