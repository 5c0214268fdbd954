from pydantic import BaseModel, validator
from typing import Optional


def _clean_name(v):
    if v is None or not v.strip():
        raise ValueError("name cannot be empty")
    return v.strip()


class AssigneeCreate(BaseModel):
    name: str
    color: Optional[str] = None

    @validator("name")
    def name_not_empty(cls, v):
        return _clean_name(v)


class AssigneeUpdate(BaseModel):
    name: str
    color: Optional[str] = None

    @validator("name")
    def name_not_empty(cls, v):
        return _clean_name(v)


class AssigneeOut(BaseModel):
    id: int
    name: str
    color: Optional[str] = None

    class Config:
        from_attributes = True
