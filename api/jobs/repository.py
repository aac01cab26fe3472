"""
Job persistence (raw SQL).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from core import db
from core.errors import InvalidArgumentError, NotFoundError
from core.sql import FilterBuilder, Tristate, sql_for_partial_update

logger = logging.getLogger(__name__)

FIELD_COLUMNS: Mapping[str, str] = MappingProxyType({"companyHandle": "company_handle"})

# The owning company is fixed at creation.
UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


async def create(
    *,
    title: str,
    company_handle: str,
    salary: int | None = None,
    equity: Decimal | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {_COLUMNS}
        """,
        title,
        salary,
        equity,
        company_handle,
    )
    if row is None:
        raise RuntimeError("Failed to create job.")
    logger.info("job_created id=%s company=%s", row["id"], company_handle)
    return row


async def find_all() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM jobs
        ORDER BY title, id
        """
    )


async def find_for_company(handle: str) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM jobs
        WHERE company_handle = $1
        ORDER BY title, id
        """,
        handle,
    )


async def filter_by(
    *,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: Tristate = Tristate.ABSENT,
) -> list[dict]:
    """
    Jobs whose title contains `title` (case-insensitive), paying at least
    `min_salary`, and with non-zero equity when `has_equity` is TRUE.

    With no criteria this is `find_all()`. A filter that matches nothing
    raises NotFoundError.
    """
    criteria = (
        FilterBuilder()
        .contains("title", title)
        .between("salary", min_salary, None)
        .flag("equity > 0", has_equity)
        .build()
    )
    if criteria.is_empty:
        return await find_all()

    rows = await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM jobs
        WHERE {criteria.where}
        ORDER BY title, id
        """,
        *criteria.params,
    )
    if not rows:
        raise NotFoundError("No job found")
    return rows


async def get(job_id: int) -> dict:
    row = await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return row


async def update(job_id: int, data: Mapping[str, Any]) -> dict:
    """
    Partial update of title, salary and/or equity.
    """
    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidArgumentError(f"Cannot update fields: {', '.join(unknown)}")

    set_clause = sql_for_partial_update(data, FIELD_COLUMNS)
    row = await db.fetch_one(
        f"""
        UPDATE jobs
        SET {set_clause.sql}
        WHERE id = ${set_clause.next_index}
        RETURNING {_COLUMNS}
        """,
        *set_clause.values,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job_updated id=%s fields=%s", job_id, ",".join(data))
    return row


async def remove(job_id: int) -> None:
    row = await db.fetch_one(
        """
        DELETE
        FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("job_deleted id=%s", job_id)
