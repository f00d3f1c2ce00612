from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Mapping

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

# (id, employee code, first, last, email, password, role, department id, shift id, monthly salary)
DEMO_ACCOUNTS = (
    ("usr_admin", "EMP_0001", "System", "Admin", "admin@example.com", "admin123", "super_admin", None, None, 0),
    ("usr_head", "EMP_0002", "Dana", "Head", "head@example.com", "head123", "dept_head", "dep_security", "shf_day", 45000),
    ("usr_guard", "EMP_0003", "Sam", "Guard", "guard@example.com", "guard123", "employee", "dep_security", "shf_night", 30000),
)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes and '--' comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False
    in_comment = False

    for i, ch in enumerate(sql):
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            continue

        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "-" and not in_single and not in_double and sql[i : i + 2] == "--":
            in_comment = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_sql_file(db_config: Mapping[str, Any], path: str | Path) -> None:
    target = DBConfig.from_settings(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connect(target)
    try:
        cur = conn.cursor()
        count = 0
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
        logger.info("Applied %s (%d statements) to %s", Path(path).name, count, target.dsn)
    finally:
        conn.close()


def ensure_database_exists(db_config: Mapping[str, Any]) -> None:
    target = DBConfig.from_settings(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping[str, Any], *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_sql_file(db_config, schema_path)


def apply_seed_sql(db_config: Mapping[str, Any], *, seed_path: str | Path) -> None:
    _run_sql_file(db_config, seed_path)


def ensure_demo_users(db_config: Mapping[str, Any]) -> None:
    """Upsert the demo accounts with freshly hashed passwords."""
    target = DBConfig.from_settings(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for user_id, code, first, last, email, password, role, dept_id, shift_id, salary in DEMO_ACCOUNTS:
            cur.execute(
                """
                INSERT INTO employees
                    (id, employee_id, first_name, last_name, email, password_hash, role,
                     department_id, shift_id, monthly_salary, joining_date, is_active)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, CURDATE(), 1)
                ON DUPLICATE KEY UPDATE
                    password_hash=VALUES(password_hash), role=VALUES(role),
                    department_id=VALUES(department_id), shift_id=VALUES(shift_id), is_active=1
                """,
                (user_id, code, first, last, email, generate_password_hash(password), role, dept_id, shift_id, salary),
            )
        cur.execute("UPDATE departments SET head_id=%s WHERE id=%s", ("usr_head", "dep_security"))
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: Mapping[str, Any]) -> list[str]:
    conn = _connect(DBConfig.from_settings(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
