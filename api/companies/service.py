"""
Company reads that span more than one table.
"""

from __future__ import annotations

from jobs import repository as jobs_repository

from . import repository


async def company_detail(handle: str) -> dict:
    """
    A company plus its jobs: { handle, ..., jobs: [{ id, title, salary, equity }, ...] }
    """
    company = await repository.get(handle)
    jobs = await jobs_repository.find_for_company(handle)
    company["jobs"] = [
        {key: value for key, value in job.items() if key != "companyHandle"}
        for job in jobs
    ]
    return company
