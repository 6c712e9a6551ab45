from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import to_civil_date
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def fetch_scalar(cur, column: str, default: Any = 0) -> Any:
    row = fetchone(cur)
    if not row or row.get(column) is None:
        return default
    return row[column]


def normalize_mysql_date(value: Any) -> date:
    """Normalize MySQL DATE values to a plain calendar date.

    mysql-connector returns DATE as datetime.date, but rows copied through
    exports or older VARCHAR columns may hold 'YYYY-MM-DD' strings or full ISO
    timestamps.
    """
    return to_civil_date(value)
