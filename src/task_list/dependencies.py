"""
Defines FastAPI dependency injectors for the database session, the task
store and the task service.
"""

import logging
from collections.abc import Generator
from typing import Optional

from fastapi import Depends
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import AppConfig
from .repository import InMemoryTaskRepository, ITaskRepository, TaskRepository
from .repository.models import Base
from .services.task_service import TaskService
from .shared.database import get_db_dialect, is_in_memory_sqlite

log = logging.getLogger(__name__)

engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None
in_memory_repository: Optional[InMemoryTaskRepository] = None
app_config: Optional[AppConfig] = None


def init_database(database_url: str) -> Engine:
    """Create the engine and session factory, then ensure the schema exists."""
    global engine, SessionLocal
    if SessionLocal is not None:
        log.warning("Database already initialized.")
        return engine

    dialect_name = get_db_dialect(database_url)
    engine_kwargs = {}

    if dialect_name == "sqlite":
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if is_in_memory_sqlite(database_url):
            # A single shared connection keeps the in-memory schema alive
            engine_kwargs["poolclass"] = pool.StaticPool
            log.warning("Using an in-memory SQLite database - tasks are lost on shutdown")
        else:
            log.info("Configuring SQLite database (connection per session)")
    elif dialect_name in ("postgresql", "mysql"):
        engine_kwargs = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_timeout": 30,
            "pool_recycle": 1800,
            "pool_pre_ping": True,
        }
        log.info("Configuring %s database with connection pooling", dialect_name)
    else:
        log.warning("Using default configuration for dialect: %s", dialect_name)

    new_engine = create_engine(database_url, **engine_kwargs)

    Base.metadata.create_all(new_engine)

    engine = new_engine
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    log.info("Database initialized successfully")
    return engine


def dispose_database() -> None:
    """Drop the engine and any in-memory store; used on shutdown and in tests."""
    global engine, SessionLocal, in_memory_repository
    if engine is not None:
        engine.dispose()
    engine = None
    SessionLocal = None
    in_memory_repository = None


def set_app_config(config: AppConfig) -> None:
    """Called during startup to provide the application configuration."""
    global app_config
    app_config = config


def get_app_config() -> AppConfig:
    return app_config if app_config is not None else AppConfig()


def get_db() -> Generator[Optional[Session], None, None]:
    """
    Request-scoped session: committed when the handler succeeds, rolled back
    on any exception. Yields None when no database is configured.
    """
    if SessionLocal is None:
        yield None
        return

    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        try:
            db.rollback()
        except Exception as rollback_error:
            log.warning("Failed to rollback after error: %s", rollback_error)
        raise
    finally:
        try:
            db.close()
        except Exception as close_error:
            log.warning("Failed to close database session: %s", close_error)


def _get_in_memory_repository() -> InMemoryTaskRepository:
    global in_memory_repository
    if in_memory_repository is None:
        log.warning(
            "No database configured - using in-memory task storage (data not persisted across restarts)"
        )
        in_memory_repository = InMemoryTaskRepository()
    return in_memory_repository


def get_task_repository(db: Optional[Session] = Depends(get_db)) -> ITaskRepository:
    """Dependency factory for the task store."""
    if db is None:
        return _get_in_memory_repository()
    return TaskRepository(db)


def get_task_service(
    task_repository: ITaskRepository = Depends(get_task_repository),
) -> TaskService:
    """Dependency factory for TaskService."""
    return TaskService(task_repository)
