"""
Idempotent schema bootstrap.

Runs at process start: creates the database (MySQL only), the tables, and any
nullable column a model declares that an older table is missing.
"""
import logging
from typing import List

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError

from .database import Base, Database
from .exceptions import StoreError

# Import every model module so Base.metadata knows all tables
from ..user import models as user_models  # noqa: F401
from ..profile import models as profile_models  # noqa: F401
from ..orders import models as order_models  # noqa: F401

logger = logging.getLogger(__name__)


def create_database_if_missing(database: Database):
    """MySQL needs the schema itself to exist before the pool can select it."""
    url = database.url
    if url.get_backend_name() != "mysql" or not url.database:
        return

    server_engine = create_engine(url.set(database=""))
    try:
        with server_engine.begin() as connection:
            connection.execute(text(f"CREATE DATABASE IF NOT EXISTS `{url.database}`"))
    finally:
        server_engine.dispose()


def add_missing_columns(database: Database) -> List[str]:
    """Add nullable model columns absent from existing tables."""
    inspector = inspect(database.engine)
    dialect = database.engine.dialect
    added = []

    for table in Base.metadata.sorted_tables:
        if not inspector.has_table(table.name):
            continue
        existing_columns = {col["name"] for col in inspector.get_columns(table.name)}

        for column in table.columns:
            if column.name in existing_columns:
                continue
            if not column.nullable:
                logger.warning(f"Cannot add NOT NULL column {table.name}.{column.name} to an existing table")
                continue

            column_type = column.type.compile(dialect=dialect)
            sql = f"ALTER TABLE {table.name} ADD COLUMN {column.name} {column_type}"
            logger.info(f"Adding column {table.name}.{column.name}: {sql}")
            with database.engine.begin() as connection:
                connection.execute(text(sql))
            added.append(f"{table.name}.{column.name}")

    return added


def ensure_schema(database: Database) -> List[str]:
    """
    Make sure the users, profiles and orders tables exist with every column.

    Safe to run on every boot. Returns the ``table.column`` names that were
    added; an already initialized store yields an empty list.

    Raises:
        StoreError: The store rejected the connection or a DDL statement
    """
    try:
        create_database_if_missing(database)
        Base.metadata.create_all(bind=database.engine)
        added = add_missing_columns(database)
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise StoreError(f"Database initialization failed: {str(e)}") from e

    logger.info("Database tables initialized")
    return added
