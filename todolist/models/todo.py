"""
Todo item data models.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, StrictBool


class TodoBase(BaseModel):
    """Base todo model."""
    title: str = Field(min_length=1)


class TodoCreate(TodoBase):
    """Request to add a todo."""
    pass


class TodoUpdate(BaseModel):
    """Request to update a todo. Omitted fields are left unchanged."""
    completed: Optional[StrictBool] = None


class TodoInDB(TodoBase):
    """Todo model as stored in database."""
    id: str
    user_id: str
    completed: bool = False
    created_at: datetime


class TodoResponse(TodoInDB):
    """Todo model for API responses."""
    pass


TodoListResponse = List[TodoResponse]
