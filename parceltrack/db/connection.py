"""
Database connection management.

Connects either through the Cloud SQL Python Connector with IAM authentication,
or directly from a SQLAlchemy URL (SQLite by default).
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator

from google.cloud.sql.connector import Connector
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from parceltrack.db.tables import metadata

logger = logging.getLogger(__name__)

# Database file used when nothing else is configured
DEFAULT_DATABASE_URL = "sqlite:///tracker.db"


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (
        None,
        "",
        ":memory:",
    )


class DatabaseConnection:
    """
    Manages the engine and session factory for the parcel database.

    Usage:
        # Initialize at startup (local SQLite file)
        DatabaseConnection.initialize(create_tables=True)

        # Or against Cloud SQL
        DatabaseConnection.initialize(
            instance_connection_name="project:region:instance",
            db_name="tracker",
            db_user="service-account@project.iam"
        )

        # Use sessions
        with DatabaseConnection.session() as session:
            ParcelStore(session).add(parcel)

        # Close at shutdown
        DatabaseConnection.close()
    """

    _engine: Engine | None = None
    _connector: Connector | None = None
    _session_factory: sessionmaker | None = None
    _initialized: bool = False

    @classmethod
    def initialize(
        cls,
        database_url: str | None = None,
        instance_connection_name: str | None = None,
        db_name: str | None = None,
        db_user: str | None = None,
        create_tables: bool = False,
    ):
        """
        Initialize the database engine.

        Args:
            database_url: SQLAlchemy URL, used when no Cloud SQL instance is configured
            instance_connection_name: Cloud SQL instance (project:region:instance)
            db_name: Cloud SQL database name
            db_user: Cloud SQL user (service account email for IAM auth)
            create_tables: Create the parcel table if it does not exist
        """
        if cls._initialized:
            return

        # Get config from environment if not provided
        instance_connection_name = instance_connection_name or os.getenv(
            "INSTANCE_CONNECTION_NAME"
        )

        if instance_connection_name:
            engine = cls._create_cloud_sql_engine(
                instance_connection_name,
                db_name or os.getenv("DB_NAME", "tracker"),
                db_user or os.getenv("DB_USER"),
            )
        else:
            url = database_url or os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
            engine = cls._create_url_engine(url)

        if create_tables:
            try:
                metadata.create_all(engine)
            except Exception:
                engine.dispose()
                if cls._connector:
                    cls._connector.close()
                    cls._connector = None
                raise

        cls._engine = engine
        cls._session_factory = sessionmaker(bind=cls._engine)
        cls._initialized = True
        logger.info(f"Database initialized: {cls._engine.url.render_as_string()}")

    @classmethod
    def _create_cloud_sql_engine(
        cls, instance_connection_name: str, db_name: str, db_user: str | None
    ) -> Engine:
        if not db_user:
            raise ValueError(
                "DB_USER environment variable is required. "
                "Should be service account email for IAM auth."
            )

        cls._connector = Connector()

        def getconn():
            assert cls._connector is not None
            return cls._connector.connect(
                instance_connection_name,
                "pg8000",
                user=db_user,
                db=db_name,
                enable_iam_auth=True,
            )

        return create_engine(
            "postgresql+pg8000://",
            creator=getconn,
            pool_pre_ping=True,  # Verify connections before use
        )

    @staticmethod
    def _create_url_engine(url: str) -> Engine:
        if _is_memory_sqlite(url):
            # Every session must see the same in-memory database
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url)

    @classmethod
    def get_engine(cls) -> Engine:
        """Get the SQLAlchemy engine."""
        if not cls._initialized or cls._engine is None:
            raise RuntimeError(
                "Database not initialized. Call DatabaseConnection.initialize() first."
            )
        return cls._engine

    @classmethod
    @contextmanager
    def session(cls) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on exception.

        Yields:
            SQLAlchemy Session
        """
        if not cls._initialized or cls._session_factory is None:
            raise RuntimeError(
                "Database not initialized. Call DatabaseConnection.initialize() first."
            )

        session = cls._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @classmethod
    def close(cls):
        """Dispose of the engine and close the connector."""
        if cls._engine:
            cls._engine.dispose()
            cls._engine = None

        if cls._connector:
            cls._connector.close()
            cls._connector = None

        cls._session_factory = None
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if the database connection is initialized."""
        return cls._initialized

    @classmethod
    def get_session(cls) -> Session:
        """
        Get a new database session.

        The caller is responsible for committing/rolling back and closing the session.
        For automatic lifecycle management, use the session() context manager instead.
        """
        if not cls._initialized or cls._session_factory is None:
            raise RuntimeError(
                "Database not initialized. Call DatabaseConnection.initialize() first."
            )

        return cls._session_factory()
