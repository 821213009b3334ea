"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging, creates
the record store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn user_registry_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import math
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import UserStore
from .schemas.user import UserRead

logger = logging.getLogger(__name__)

DEMO_USERS = (
    {"name": "Anshul", "age": 21, "isMarried": False},
    {"name": "Aniket", "age": 22, "isMarried": False},
)


def create_store(seed: bool = False) -> UserStore:
    """Return a new store, holding the demo users when ``seed`` is true."""
    store = UserStore()
    if seed:
        for data in DEMO_USERS:
            store.add(UserRead.model_validate(data))
        logger.info("Seeded store with %d demo users", len(store))
    return store


def _finite_or_text(value: float):
    return value if math.isfinite(value) else str(value)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 like FastAPI does, writing NaN and infinities in echoed input as text.

    JSON bodies may contain ``NaN`` or ``Infinity``; the rejected value
    is echoed back in ``detail`` and strict JSON cannot carry it.
    """
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    detail = jsonable_encoder(exc.errors(), custom_encoder={float: _finite_or_text})
    return JSONResponse(status_code=422, content={"detail": detail})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns its own ``UserStore`` on ``app.state``; two
    apps never share records.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process‑wide ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.user_store = create_store(seed=app_settings.seed_demo_users)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Versioned routes live under /api/v1.  The same router is also
    # mounted at the root so existing clients calling ``/user`` keep
    # working.
    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
