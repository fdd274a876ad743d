from pydantic import BaseModel


class UserProfile(BaseModel):
    name: str = ""
    birthdate: str = ""


class UserSave(BaseModel):
    name: str | None = None
    birthdate: str | None = None


class UserSaveResponse(BaseModel):
    success: bool = True
    user: UserProfile
