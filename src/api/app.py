import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.api.context import build_context

logger = logging.getLogger(__name__)


def create_app(ApplicationConfig) -> FastAPI:
    context = build_context(ApplicationConfig)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_SCHEMA:
            async with context.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database schema ready")
        yield
        await context.engine.dispose()

    app = FastAPI(
        title="mproject",
        version=ApplicationConfig.SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import projects, role_types, server, status_types, tasks, team_members

    app.include_router(projects.router, prefix=ApplicationConfig.API_PREFIX, tags=["Projects"])
    app.include_router(status_types.router, prefix=ApplicationConfig.API_PREFIX, tags=["Status Types"])
    app.include_router(role_types.router, prefix=ApplicationConfig.API_PREFIX, tags=["Project Role Types"])
    app.include_router(tasks.router, prefix=ApplicationConfig.API_PREFIX, tags=["Tasks"])
    app.include_router(team_members.router, prefix=ApplicationConfig.API_PREFIX, tags=["Team Members"])
    app.include_router(server.router, prefix=ApplicationConfig.API_PREFIX, tags=["Server"])

    return app
