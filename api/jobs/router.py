"""
Job API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies
from core.sql import Tristate

from . import repository, schemas

router = APIRouter()


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
async def create_job(
    request: schemas.JobCreate,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    job = await repository.create(
        title=request.title,
        salary=request.salary,
        equity=request.equity,
        company_handle=request.company_handle,
    )
    return {"job": job}


@router.get("/jobs")
async def list_jobs(
    title: str | None = Query(default=None, max_length=200),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    has_equity: str | None = Query(default=None, alias="hasEquity"),
) -> dict:
    jobs = await repository.filter_by(
        title=title,
        min_salary=min_salary,
        has_equity=Tristate.parse(has_equity),
    )
    return {"jobs": jobs}


@router.get("/jobs/{job_id}")
async def get_job(job_id: int) -> dict:
    return {"job": await repository.get(job_id)}


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: int,
    request: schemas.JobUpdate,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    job = await repository.update(job_id, request.changes())
    return {"job": job}


@router.delete("/jobs/{job_id}")
async def delete_job(
    job_id: int,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    await repository.remove(job_id)
    return {"deleted": job_id}
