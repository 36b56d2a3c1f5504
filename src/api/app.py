from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from .error import ClientError, ServerError
from src.domain.errors import DependencyError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_dependency_error(request: Request, exc: DependencyError):
    error = exc.to_error()
    logger.error(f"Dependency error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": {"code": error.code, "message": "Upstream dependency failed"}},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.adapter.seed import seed_reference_data, seed_super_admin
    from src.adapter.services.identity_provider import LocalIdentityProvider
    from src.adapter.services.tenant_store import SqlAlchemyTenantStore
    from src.depends import AsyncSessionLocal, engine

    config = app.state.config
    if config.SEED_REFERENCE_DATA:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        async with AsyncSessionLocal() as session:
            await seed_reference_data(SqlAlchemyTenantStore(session), config)
            if config.SUPER_ADMIN_EMAIL:
                await seed_super_admin(
                    SqlAlchemyTenantStore(session),
                    LocalIdentityProvider(session),
                    config.SUPER_ADMIN_EMAIL,
                    config.SUPER_ADMIN_PASSWORD,
                )
    yield


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Tenancy API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, memberships, organizations, principals, profile

    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(profile.router, tags=["Profile"])
    app.include_router(organizations.router, tags=["Organizations"])
    app.include_router(memberships.router, tags=["Memberships"])
    app.include_router(principals.router, tags=["Principals"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(DependencyError, handle_dependency_error)

    return app
