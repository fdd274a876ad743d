from fastapi import APIRouter

from app.categories.schemas import CategoryAddResponse, CategoryCreate
from app.dependencies import CategoryServiceDep

router = APIRouter()


@router.get("", response_model=list[str])
async def list_categories(service: CategoryServiceDep) -> list[str]:
    return await service.list_all()


@router.post("", response_model=CategoryAddResponse)
async def add_category(data: CategoryCreate, service: CategoryServiceDep) -> CategoryAddResponse:
    categories = await service.add(data.name)
    return CategoryAddResponse(categories=categories)
