from typing import Any, Dict, Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker, Session
from wallet_api.config import get_settings

settings = get_settings()


def _engine_kwargs(url: str) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"pool_pre_ping": True, "echo": settings.debug}
    if make_url(url).get_backend_name() == "sqlite":
        # Sync endpoints run on FastAPI's thread pool
        kwargs["connect_args"] = {"check_same_thread": False}
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(
    autoflush=False,
    bind=engine
)

class Base(DeclarativeBase):
    pass


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the wallet table if it does not exist yet."""
    from wallet_api import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
