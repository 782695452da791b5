from typing import Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from postpartum.api.errors import GenerationFailure, MissingCredential, TransportFailure, MalformedResponse
from postpartum.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from postpartum.api.routes import settings, plan, shopping

load_dotenv()

# Logging
logger = logging.getLogger("postpartum_app")

# Initialize FastAPI app
app = FastAPI(title="Postpartum 30-Day Meal Program API")

# Include routers
app.include_router(settings.router)
app.include_router(plan.router)
app.include_router(shopping.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notices when the app starts."""
    start_event_observers()
    logger.info("Web observers for program events started")


# -------------------- Error mapping --------------------
_STATUS_BY_FAILURE = {
    MissingCredential: 503,
    TransportFailure: 502,
    MalformedResponse: 502,
}


@app.exception_handler(GenerationFailure)
async def _generation_failure_handler(request: Request, exc: GenerationFailure):
    status = next((code for kind, code in _STATUS_BY_FAILURE.items() if isinstance(exc, kind)), 502)
    logger.warning("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})


# -------------------- Events --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)


@app.get('/api/health')
def health():
    return {"status": "ok"}
