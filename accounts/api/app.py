from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.to_dict()
    logger.warning(f"Client error on {request.url.path}: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = exc.to_dict()
    logger.error(
        f"Server error on {request.url.path}: {exc.base_error.code} {exc.base_error.message}"
    )
    return JSONResponse(
        status_code=exc.status_code, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from accounts.depends import create_tables

    await create_tables()
    yield


def create_app(ApplicationConfig, create_schema: bool = True) -> FastAPI:
    app = FastAPI(
        title="Accounts API",
        version="0.1.0",
        lifespan=lifespan if create_schema else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from accounts.api.routes import auth, health_check, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(user.router, tags=["User"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
