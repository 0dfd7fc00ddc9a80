"""
Database Session Management - Core database connectivity layer
"""

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
import logging

from task_tracker.core.config import Settings

logger = logging.getLogger(__name__)

# Base class for all SQLAlchemy models - provides metadata and table registry
Base = declarative_base()

class Database:
    """
    Process-wide storage handle: one engine plus its session factory.

    Created at startup and handed to the application explicitly;
    close() releases every pooled connection at shutdown.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs = {"echo": echo}  # Log all SQL queries when enabled

        if url.startswith("sqlite"):
            # SQLite connections are shared with FastAPI's worker threads
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url.rstrip("/") == "sqlite:":
                # In-memory database lives inside one connection
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_size=pool_size,  # Number of persistent connections
                max_overflow=max_overflow,  # Additional connections when pool is exhausted
                pool_timeout=pool_timeout,  # Wait time for available connection
                pool_pre_ping=True,  # Verify connection health before using
            )

        self.engine = create_engine(url, **engine_kwargs)

        @event.listens_for(self.engine, "connect")
        def receive_connect(dbapi_conn, connection_record):
            logger.debug("🔌 New database connection established")

        @event.listens_for(self.engine, "close")
        def receive_close(dbapi_conn, connection_record):
            logger.debug("🔌 Database connection closed")

        # Session factory - creates new sessions for each request
        self.session_factory = sessionmaker(
            autocommit=False,  # Require explicit commits
            autoflush=False,   # Control when changes are flushed to database
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, config: Settings) -> "Database":
        return cls(
            config.DATABASE_URL,
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            pool_timeout=config.DB_POOL_TIMEOUT,
            echo=config.DEBUG,
        )

    def session(self) -> Session:
        return self.session_factory()

    def create_tables(self) -> None:
        """
        Create all tables registered on Base.
        Used for development setup - production should use migrations.
        """
        logger.info("🏗️  Creating database tables...")
        try:
            from task_tracker.models import task  # noqa: F401  Register models with Base
            Base.metadata.create_all(bind=self.engine)
            logger.info("✅ Database tables created successfully")
        except Exception as e:
            logger.error(f"❌ Failed to create database tables: {str(e)}", exc_info=True)
            raise  # Fail fast - app shouldn't start without database

    def check_connection(self) -> bool:
        """
        Verify database connectivity - used for health checks and startup validation.
        Returns True if connection successful, False otherwise.
        """
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            logger.debug("✅ Database connection successful")
            return True
        except Exception as e:
            logger.error(f"❌ Database connection failed: {str(e)}", exc_info=True)
            return False

    def pool_stats(self) -> dict:
        """
        Current connection pool statistics.
        Only queue pools keep counters; other pools report their status string.
        """
        pool = self.engine.pool
        if not isinstance(pool, QueuePool):
            return {"pool": pool.status()}
        return {
            "pool_size": pool.size(),  # Total connections in pool
            "checked_out": pool.checkedout(),  # Currently active connections
            "overflow": pool.overflow(),  # Connections beyond pool_size
            "checked_in": pool.checkedin(),  # Idle connections in pool
        }

    def close(self) -> None:
        """Gracefully close all database connections at shutdown"""
        logger.info("🔌 Closing database connections...")
        self.engine.dispose()
        logger.info("✅ All database connections closed")
