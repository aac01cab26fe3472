"""
Company persistence (raw SQL).

Records are dicts keyed by the API field names (`numEmployees`, `logoUrl`);
column aliases in every SELECT/RETURNING keep the two in sync.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from core import db
from core.errors import ConflictError, InvalidArgumentError, NotFoundError
from core.sql import FilterBuilder, sql_for_partial_update

logger = logging.getLogger(__name__)

FIELD_COLUMNS: Mapping[str, str] = MappingProxyType(
    {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }
)

UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


async def create(
    *,
    handle: str,
    name: str,
    description: str,
    num_employees: int | None = None,
    logo_url: str | None = None,
) -> dict:
    """
    Insert a company. A clash on handle (or name) raises ConflictError and
    leaves storage untouched.
    """
    row = await db.fetch_one(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        ON CONFLICT DO NOTHING
        RETURNING {_COLUMNS}
        """,
        handle,
        name,
        description,
        num_employees,
        logo_url,
    )
    if row is None:
        logger.info("company_duplicate handle=%s", handle)
        raise ConflictError(f"Duplicate company: {handle}")
    logger.info("company_created handle=%s", handle)
    return row


async def find_all() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM companies
        ORDER BY name
        """
    )


async def filter_by(
    *,
    name: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> list[dict]:
    """
    Companies whose name contains `name` (case-insensitive) and whose
    employee count lies within the inclusive bounds given.

    With no criteria this is `find_all()`. A filter that matches nothing
    raises NotFoundError.
    """
    criteria = (
        FilterBuilder()
        .contains("name", name)
        .between("num_employees", min_employees, max_employees)
        .build()
    )
    if criteria.is_empty:
        return await find_all()

    rows = await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM companies
        WHERE {criteria.where}
        ORDER BY name
        """,
        *criteria.params,
    )
    if not rows:
        raise NotFoundError("No company found")
    return rows


async def get(handle: str) -> dict:
    row = await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    return row


async def update(handle: str, data: Mapping[str, Any]) -> dict:
    """
    Partial update: only the fields present in `data` change.

    `data` may hold: name, description, numEmployees, logoUrl.
    """
    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise InvalidArgumentError(f"Cannot update fields: {', '.join(unknown)}")

    set_clause = sql_for_partial_update(data, FIELD_COLUMNS)
    row = await db.fetch_one(
        f"""
        UPDATE companies
        SET {set_clause.sql}
        WHERE handle = ${set_clause.next_index}
        RETURNING {_COLUMNS}
        """,
        *set_clause.values,
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company_updated handle=%s fields=%s", handle, ",".join(data))
    return row


async def remove(handle: str) -> None:
    row = await db.fetch_one(
        """
        DELETE
        FROM companies
        WHERE handle = $1
        RETURNING handle
        """,
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("company_deleted handle=%s", handle)
