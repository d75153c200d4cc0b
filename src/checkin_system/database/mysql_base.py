"""Cursor helpers shared by the MySQL repositories.

Each call opens a short-lived connection; a block commits when it exits
cleanly and rolls back on any error.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .connection import DatabaseConnection

Params = Sequence[Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Any]:
    conn = conn_factory.connect()
    # buffered: single-row lookups may leave rows unread
    cur = conn.cursor(dictionary=dictionary, buffered=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def query_one(conn_factory: DatabaseConnection, sql: str, params: Params = ()) -> Optional[Dict[str, Any]]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def query_all(conn_factory: DatabaseConnection, sql: str, params: Params = ()) -> List[Dict[str, Any]]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def execute(conn_factory: DatabaseConnection, sql: str, params: Params = ()) -> Tuple[int, int]:
    """Run one write statement; returns ``(lastrowid, rowcount)``."""
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return int(cur.lastrowid or 0), int(cur.rowcount)
