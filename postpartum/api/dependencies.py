"""FastAPI dependency providing the process-wide ProgramSession."""
from functools import lru_cache

from postpartum.api.api_ai import ContentGenerator
from postpartum.logic.session import ProgramSession
from postpartum.utilities.config import AGGREGATE_PARTIAL_RESULTS


@lru_cache
def get_session() -> ProgramSession:
    return ProgramSession(ContentGenerator(), partial_results=AGGREGATE_PARTIAL_RESULTS)
