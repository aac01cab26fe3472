"""
Database schema (DDL).

Safe to run repeatedly; every statement uses IF NOT EXISTS:
    python -m core.schema
"""

from __future__ import annotations

import asyncio
import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS companies (
    handle          VARCHAR(25) PRIMARY KEY CHECK (handle = lower(handle)),
    name            TEXT UNIQUE NOT NULL,
    description     TEXT NOT NULL,
    num_employees   INTEGER CHECK (num_employees >= 0),
    logo_url        TEXT
);

CREATE TABLE IF NOT EXISTS jobs (
    id              SERIAL PRIMARY KEY,
    title           TEXT NOT NULL,
    salary          INTEGER CHECK (salary >= 0),
    equity          NUMERIC CHECK (equity <= 1.0 AND equity >= 0),
    company_handle  VARCHAR(25) NOT NULL REFERENCES companies ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS users (
    username        VARCHAR(25) PRIMARY KEY,
    password_hash   TEXT NOT NULL,
    is_admin        BOOLEAN NOT NULL DEFAULT FALSE,
    created_at      TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS idx_jobs_company_handle ON jobs(company_handle);
"""


async def create_tables() -> None:
    await db.execute(SCHEMA_SQL)
    logger.info("schema_ready")


async def _main() -> None:
    await db.init_pool()
    try:
        await create_tables()
    finally:
        await db.close_pool()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
