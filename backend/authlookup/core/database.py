from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from authlookup.core.config import settings

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,   # checks stale connections
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def read_only_transaction(db: Session) -> Iterator[Session]:
    """
    Scope a read-only unit of work on `db`.

    On PostgreSQL the transaction is marked READ ONLY, so this must be entered
    before any other statement runs on the session. The transaction is always
    rolled back on exit; nothing done inside is ever committed.
    """
    if db.get_bind().dialect.name == "postgresql":
        db.execute(text("SET TRANSACTION READ ONLY"))
    try:
        yield db
    finally:
        db.rollback()
