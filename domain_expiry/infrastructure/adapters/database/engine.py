"""Async SQLAlchemy engine with a bounded connection pool."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """Configuration for the relational store."""

    url: str | URL
    pool_size: int = 10
    pool_timeout: float = 30.0


def create_database_engine(config: DatabaseConfig) -> AsyncEngine:
    """
    Create the shared async engine.

    The pool never opens more than ``pool_size`` connections; callers wait
    up to ``pool_timeout`` seconds for one to free up.
    """
    url = make_url(config.url)
    logger.info(
        "Creating database engine for %s (pool size %d)",
        url.render_as_string(hide_password=True),
        config.pool_size,
    )
    return create_async_engine(
        url,
        pool_size=config.pool_size,
        max_overflow=0,
        pool_timeout=config.pool_timeout,
        pool_pre_ping=True,
    )
