# File: vidshare/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from vidshare.core.config.settings import settings

# USE_SQLITE=true: pooled SQLite connections may be reused from another thread
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """Yields a catalog session and closes it when the caller is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
