import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session
from .settings import settings
from .errors import StoreUnavailable

logger = logging.getLogger(__name__)

# check_same_thread=False is needed only for SQLite
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

# Serializes every read and write of account/revocation state.
store_lock = threading.RLock()

def create_db_and_tables():
    database = engine.url.database
    if engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

def utcnow() -> datetime:
    """Naive UTC, the form SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

@contextmanager
def store_guard(session: Session):
    """
    Holds the store lock for the duration of the block and turns database
    failures into StoreUnavailable after rolling back.
    """
    with store_lock:
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Store failure: %s", e)
            raise StoreUnavailable(str(e)) from e
