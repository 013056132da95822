from .session import (
    Base,
    async_session,
    create_tables,
    enable_sqlite_foreign_keys,
    gather_in_sessions,
    local_session,
    session_factory,
)

__all__ = [
    "Base",
    "async_session",
    "create_tables",
    "enable_sqlite_foreign_keys",
    "gather_in_sessions",
    "local_session",
    "session_factory",
]
