"""
Service context: everything built once at startup and shared read-only by
all requests.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.gateway import AuthorizationGateway
from src.api.operations import build_operations
from src.api.utils.jwt import ClaimsExtractor


@dataclass(frozen=True)
class ServiceContext:
    engine: AsyncEngine
    session_factory: sessionmaker
    claims_extractor: ClaimsExtractor
    gateway: AuthorizationGateway
    started_at: datetime


def build_context(config) -> ServiceContext:
    engine = create_async_engine(config.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    started_at = datetime.now(UTC)
    gateway = AuthorizationGateway(
        build_operations(config.SERVER_VERSION, started_at, config.REORDER_ATOMIC)
    )
    return ServiceContext(
        engine=engine,
        session_factory=session_factory,
        claims_extractor=ClaimsExtractor.from_config(config),
        gateway=gateway,
        started_at=started_at,
    )
