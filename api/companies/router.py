"""
Company API endpoints.

Reads are public; writes require an admin token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies

from . import repository, schemas, service

router = APIRouter()


@router.post("/companies", status_code=status.HTTP_201_CREATED)
async def create_company(
    request: schemas.CompanyCreate,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    company = await repository.create(
        handle=request.handle,
        name=request.name,
        description=request.description,
        num_employees=request.num_employees,
        logo_url=request.logo_url,
    )
    return {"company": company}


@router.get("/companies")
async def list_companies(
    name: str | None = Query(default=None, max_length=200),
    min_employees: int | None = Query(default=None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(default=None, alias="maxEmployees", ge=0),
) -> dict:
    companies = await repository.filter_by(
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": companies}


@router.get("/companies/{handle}")
async def get_company(handle: str) -> dict:
    return {"company": await service.company_detail(handle)}


@router.patch("/companies/{handle}")
async def update_company(
    handle: str,
    request: schemas.CompanyUpdate,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    company = await repository.update(handle, request.changes())
    return {"company": company}


@router.delete("/companies/{handle}")
async def delete_company(
    handle: str,
    _: dict = Depends(auth_dependencies.ensure_admin),
) -> dict:
    await repository.remove(handle)
    return {"deleted": handle}
