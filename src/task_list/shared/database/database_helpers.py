"""
Database dialect helpers.
"""

from sqlalchemy.engine.url import make_url


def get_db_dialect(database_url: str) -> str:
    """Return the backend name of a database URL, e.g. ``sqlite`` or ``postgresql``."""
    return make_url(database_url).get_backend_name()


def is_in_memory_sqlite(database_url: str) -> bool:
    """True for ``sqlite://`` and ``sqlite:///:memory:`` URLs."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")
