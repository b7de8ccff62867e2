"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budgeting.core.config import settings
from budgeting.db.base import Base

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI may hand a session to a different worker thread
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    # Import models so SQLAlchemy registers every table
    import budgeting.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
