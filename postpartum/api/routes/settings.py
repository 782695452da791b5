from fastapi import APIRouter, Depends

from postpartum.api.dependencies import get_session
from postpartum.logic.session import ProgramSession
from postpartum.utilities.validators import SettingsInput

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
def read_settings(session: ProgramSession = Depends(get_session)):
    return session.settings.to_dict()


@router.put("")
def replace_settings(payload: SettingsInput, session: ProgramSession = Depends(get_session)):
    """Commit an edited settings draft; start date and dislike changes drop the cached plan."""
    had_plan = session.cached_plan is not None
    settings = session.update_settings(payload.to_settings())
    return {
        "settings": settings.to_dict(),
        "plan_invalidated": had_plan and session.cached_plan is None,
        "viewing_day": session.viewing_day,
    }
