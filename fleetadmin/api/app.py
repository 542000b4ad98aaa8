import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager, TokenNamespace
from .error import ClientError, ServerError
from .middleware.request_logging import RequestLoggingMiddleware
from .utils.response import fail

logger = logging.getLogger(__name__)

LOCATIONS = ("body", "query", "path", "header")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single timestamped stream handler on the root logger"""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(fail(exc.base_error.message, exc.errors())),
        headers=exc.headers,
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=fail("Internal server error", exc.errors()),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part not in LOCATIONS),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    logger.warning(f"Validation error: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(fail("Validation failed", errors)),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=fail(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=fail("Internal server error", {"code": "INTERNAL_ERROR"}),
    )


def build_token_managers(ApplicationConfig) -> dict:
    return {
        TokenNamespace.admin: TokenManager(
            ApplicationConfig.ADMIN_JWT_SECRET,
            timedelta(hours=float(ApplicationConfig.ADMIN_JWT_EXPIRATION_HOURS)),
        ),
        TokenNamespace.user: TokenManager(
            ApplicationConfig.USER_JWT_SECRET,
            timedelta(hours=float(ApplicationConfig.USER_JWT_EXPIRATION_HOURS)),
        ),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.auto_create_schema:
        from fleetadmin.adapter.services.module_catalog import seed_module_catalog
        from fleetadmin.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
        from fleetadmin.depends import AsyncSessionLocal, engine

        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        async with AsyncSessionLocal() as session:
            await seed_module_catalog(SqlAlchemyUnitOfWork(session))
    yield


def create_app(ApplicationConfig) -> FastAPI:
    # Missing secrets are fatal before anything else is built
    ApplicationConfig.validate()

    app = FastAPI(title="Fleet Admin API", version="0.1.0", lifespan=lifespan)

    app.state.token_managers = build_token_managers(ApplicationConfig)
    app.state.password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    app.state.auto_create_schema = ApplicationConfig.DB_AUTO_CREATE

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from fleetadmin.api.routes import (
        admin_auth,
        auth,
        companies,
        company_admins,
        drivers,
        health_check,
        modules,
        users,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(admin_auth.router, tags=["Admin Authentication"])
    app.include_router(companies.router, tags=["Companies"])
    app.include_router(company_admins.router, tags=["Company Admins"])
    app.include_router(modules.router, tags=["Modules"])
    app.include_router(drivers.router, tags=["Drivers"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(users.router, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
