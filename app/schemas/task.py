# app/schemas/task.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Presence, type and emptiness are checked by the service, not here.
    title: Optional[Any] = None


class TaskUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    completed: Optional[StrictBool] = None


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    completed: bool
    created_at: datetime = Field(serialization_alias="createdAt")


class TaskList(BaseModel):
    tasks: List[TaskRead]
    total: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
