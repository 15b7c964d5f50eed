from __future__ import annotations

import logging
from typing import Iterable

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS employees (
    id VARCHAR(64) NOT NULL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    employee_code VARCHAR(64) NOT NULL,
    contact VARCHAR(32) NULL,
    is_active TINYINT(1) NOT NULL DEFAULT 1,
    created_at DATETIME(6) NOT NULL,
    INDEX idx_employees_code (employee_code)
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;

CREATE TABLE IF NOT EXISTS daily_records (
    id VARCHAR(64) NOT NULL PRIMARY KEY,
    employee_id VARCHAR(64) NOT NULL,
    record_date DATE NOT NULL,
    macharlu DECIMAL(14, 2) NOT NULL DEFAULT 0,
    karchulu DECIMAL(14, 2) NOT NULL DEFAULT 0,
    notes TEXT NULL,
    created_at DATETIME(6) NOT NULL,
    INDEX idx_records_employee (employee_id),
    INDEX idx_records_date (record_date),
    CONSTRAINT fk_records_employee FOREIGN KEY (employee_id) REFERENCES employees (id)
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;

CREATE TABLE IF NOT EXISTS app_users (
    user_id INT NOT NULL AUTO_INCREMENT PRIMARY KEY,
    username VARCHAR(64) NOT NULL UNIQUE,
    password_hash VARCHAR(255) NOT NULL,
    role VARCHAR(16) NOT NULL DEFAULT 'user',
    is_active TINYINT(1) NOT NULL DEFAULT 1
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;
"""


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
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


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, sql: str = SCHEMA_SQL) -> None:
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
    logger.info("Schema applied to %s", conn_factory.config.database)


def ensure_app_users(conn_factory: DatabaseConnection, accounts: Iterable[dict]) -> None:
    """Insert or refresh the configured login accounts."""
    with db_cursor(conn_factory) as (_, cur):
        for account in accounts:
            password_hash = generate_password_hash(account["password"])
            cur.execute("SELECT user_id FROM app_users WHERE username=%s", (account["username"],))
            if cur.fetchone():
                cur.execute(
                    "UPDATE app_users SET password_hash=%s, role=%s, is_active=1 WHERE username=%s",
                    (password_hash, account.get("role", "user"), account["username"]),
                )
            else:
                cur.execute(
                    "INSERT INTO app_users (username, password_hash, role) VALUES (%s, %s, %s)",
                    (account["username"], password_hash, account.get("role", "user")),
                )


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in fetchall(cur)]
