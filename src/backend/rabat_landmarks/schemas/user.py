# rabat_landmarks/schemas/user.py
from pydantic import BaseModel, ConfigDict, Field

class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

class User(UserCreate):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
