from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    field_validator,
)


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _strip_non_empty(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
    return value


class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1, description="Store-assigned identifier")
    title: str = Field(min_length=1, description="Short task title")
    description: str = Field(min_length=1, description="Task details")
    completed: bool = Field(default=False)
    priority: Priority = Field(default=Priority.MEDIUM)
    created_at: datetime = Field(
        alias="createdAt", description="Creation timestamp (UTC)"
    )


class TaskCreate(BaseModel):
    """Normalized payload for creating a task."""

    title: str
    description: str
    completed: StrictBool = False
    priority: Priority = Priority.MEDIUM

    @field_validator("title", "description", mode="before")
    @classmethod
    def validate_text(cls, value: Any) -> Any:
        return _strip_non_empty(value)


class TaskUpdate(BaseModel):
    """Partial update; ``None`` marks a field that was not supplied."""

    title: str | None = None
    description: str | None = None
    completed: StrictBool | None = None
    priority: Priority | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def validate_text(cls, value: Any) -> Any:
        return _strip_non_empty(value)

    def is_empty(self) -> bool:
        return not self.supplied()

    def supplied(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
