from fastapi import APIRouter

from app.dependencies import UserServiceDep
from app.users.schemas import UserProfile, UserSave, UserSaveResponse

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_user(service: UserServiceDep) -> UserProfile:
    return await service.get()


@router.post("", response_model=UserSaveResponse)
async def save_user(data: UserSave, service: UserServiceDep) -> UserSaveResponse:
    user = await service.save(data)
    return UserSaveResponse(user=user)
