from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class WeighInBody(BaseModel):
    weight: float = Field(allow_inf_nan=False)
    weigh_date: datetime


class AuthorBody(BaseModel):
    firstName: str
    lastName: str


class PostBody(BaseModel):
    title: str
    content: str
    author: AuthorBody


class PostUpdateBody(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorBody] = None
