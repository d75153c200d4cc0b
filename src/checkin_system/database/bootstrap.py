from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Sequence

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

DEMO_ROSTER: Sequence[tuple[str, str]] = (
    ("Ahmad Noori", "weekday"),
    ("Abdirahman Osman", "weekend"),
    ("Fatima Hassan", "both"),
    ("Yusuf Ali", "weekday"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable under any DB_NAME.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside of quoted strings and '--' comments."""
    buf: list[str] = []
    quote: str | None = None
    escape = False

    for line in sql.splitlines(keepends=True):
        if quote is None and line.lstrip().startswith("--"):
            continue
        for ch in line:
            if escape:
                buf.append(ch)
                escape = False
                continue
            if ch == "\\":
                buf.append(ch)
                escape = True
                continue
            if ch in ("'", '"'):
                if quote is None:
                    quote = ch
                elif quote == ch:
                    quote = None
                buf.append(ch)
                continue
            if ch == ";" and quote is None:
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path)


def seed_demo_students(db_config: dict, roster: Sequence[tuple[str, str]] = DEMO_ROSTER) -> int:
    """Insert the demo roster, skipping names already present. Returns rows added."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    added = 0
    try:
        cur = conn.cursor()
        for name, class_type in roster:
            cur.execute("SELECT student_id FROM students WHERE LOWER(name)=LOWER(%s) AND active=1", (name,))
            if cur.fetchone():
                continue
            cur.execute(
                "INSERT INTO students(name, class_type, active) VALUES(%s,%s,1)",
                (name, class_type),
            )
            added += 1
        conn.commit()
    finally:
        conn.close()
    logger.info("Seeded %d demo students", added)
    return added


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
