from pydantic import BaseModel


class CategoryCreate(BaseModel):
    name: str | None = None


class CategoryAddResponse(BaseModel):
    success: bool = True
    categories: list[str]
