from academy.core.config import get_database_url, get_log_level
from academy.core.database import Base, create_db_engine, create_session_factory, get_db, init_db

__all__ = [
    "get_database_url",
    "get_log_level",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_db",
    "init_db",
]
