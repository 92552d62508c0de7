import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from . import __version__
from .config import Settings
from .core import configure_logging
from .core.exceptions import PGFinderError
from .database import Base, build_engine, build_session_factory
from .api import auth, owner, admin, public
from . import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: PGFinderError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc)}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'invalid value')}" if location else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around an explicit ``Settings`` instance."""
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_format)

    engine = build_engine(settings)
    # Create database tables
    Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title=settings.app_name,
        description="Paying-guest listing marketplace",
        version=__version__,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(PGFinderError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(auth.router)
    app.include_router(owner.router)
    app.include_router(admin.router)
    app.include_router(public.router)

    logger.info("%s ready (database: %s)", settings.app_name, engine.url.render_as_string(hide_password=True))
    return app


app = create_app()
