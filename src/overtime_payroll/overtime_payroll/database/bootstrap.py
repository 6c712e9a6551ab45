from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from ..core.constants import DEFAULT_SALARY_TIERS
from .connection import DatabaseConnection, DBConfig
from .mysql_base import db_cursor, fetch_scalar

logger = logging.getLogger(__name__)

_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")


def _strip_create_db_and_use(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the script.
    return _CREATE_DB_OR_USE.sub("", sql)


def split_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' that are not inside quotes; skip `--` comments."""
    buf: list[str] = []
    quote = ""
    escaped = False

    for line in sql.splitlines(keepends=True):
        if not quote and line.lstrip().startswith("--"):
            continue
        for ch in line:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif quote:
                if ch == quote:
                    quote = ""
            elif ch in ("'", '"'):
                quote = ch
            elif ch == ";":
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(conn_factory: DatabaseConnection, path: Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    count = 0
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in split_sql_statements(sql):
            cur.execute(stmt)
            count += 1
    return count


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    executed = _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(schema_path))
    logger.info("Applied %s (%d statements)", schema_path, executed)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    executed = _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(seed_path))
    logger.info("Applied %s (%d statements)", seed_path, executed)


def ensure_default_salary_tiers(db_config: dict) -> int:
    """Insert the predefined firefighter ranks when `cargos` is empty.

    Returns the number of rows inserted.
    """

    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT COUNT(*) AS total FROM cargos")
        if int(fetch_scalar(cur, "total")) > 0:
            return 0
        for name, salary in DEFAULT_SALARY_TIERS:
            cur.execute("INSERT INTO cargos (nombre, salario) VALUES (%s, %s)", (name, int(salary)))
    logger.info("Seeded %d default salary tiers", len(DEFAULT_SALARY_TIERS))
    return len(DEFAULT_SALARY_TIERS)


def list_tables(db_config: dict) -> list[str]:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
