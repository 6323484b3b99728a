import logging

from sqlalchemy import JSON, create_engine, event
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from app.core.config import settings

logger = logging.getLogger(__name__)

# -----------------------
# Database URL
# -----------------------
DATABASE_URL = settings.sqlalchemy_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")

# Hide password in logs
safe_db_url = (
    DATABASE_URL.replace(settings.db_password, "****")
    if settings.db_password and not settings.database_url
    else DATABASE_URL
)
logger.info(f"Connecting to database: {safe_db_url}")

# -----------------------
# SQLAlchemy engine
# -----------------------
if IS_SQLITE:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.db_echo,
        connect_args={"check_same_thread": False, "timeout": 30},
    )
else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.db_echo,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        connect_args={"connect_timeout": 5},
    )


# -----------------------
# Force configured timezone for PostgreSQL connections
# -----------------------
if not IS_SQLITE:

    @event.listens_for(engine, "connect")
    def set_timezone(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute(f"SET timezone='{settings.timezone}'")
        cursor.close()


# -----------------------
# Test connection
# -----------------------
try:
    with engine.connect() as conn:
        logger.info("Database connection successful ✅")
except Exception as e:
    logger.error(f"Failed to connect to database ❌: {str(e)}")
    raise

# -----------------------
# Session and Base
# -----------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# JSONB on PostgreSQL, plain JSON elsewhere
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


# -----------------------
# Dependency for FastAPI
# -----------------------
def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database error occurred: {type(e).__name__}")
        db.rollback()
        raise
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
