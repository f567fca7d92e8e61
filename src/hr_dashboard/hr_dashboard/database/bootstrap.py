"""Schema bootstrap for database/schema.sql (used by AUTO_INIT_DB and scripts/init_db.py)."""

from __future__ import annotations

import logging
import re
from contextlib import closing
from pathlib import Path
from typing import Iterator

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

_LINE_COMMENT = re.compile(r"^\s*--.*$", re.MULTILINE)
_DB_SELECTION = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b[^;]*;", re.IGNORECASE | re.MULTILINE)
# ';' followed by an even number of single quotes is outside a string literal.
_STATEMENT_END = re.compile(r";(?=(?:[^']*'[^']*')*[^']*\Z)")


def split_statements(sql: str) -> Iterator[str]:
    """Yield the executable statements of a schema file.

    The target database comes from DB_CONFIG, so CREATE DATABASE / USE lines
    in the file are dropped.
    """

    sql = _DB_SELECTION.sub("", _LINE_COMMENT.sub("", sql))
    for chunk in _STATEMENT_END.split(sql):
        stmt = chunk.strip()
        if stmt:
            yield stmt


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with closing(DatabaseConnection(target).connect(with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    schema_path = Path(schema_path)
    statements = list(split_statements(schema_path.read_text(encoding="utf-8")))

    with closing(DatabaseConnection(DBConfig.from_dict(db_config)).connect()) as conn:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    logger.info("Applied %d schema statements from %s", len(statements), schema_path.name)


def list_tables(db_config: dict) -> list[str]:
    with closing(DatabaseConnection(DBConfig.from_dict(db_config)).connect()) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(str(row[0]) for row in cur.fetchall())
