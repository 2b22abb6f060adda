"""Pydantic schemas for tasks, shared by the API and the client."""

from datetime import date, datetime, timezone
from enum import Enum
import unicodedata
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class TaskStatus(str, Enum):
    """Kanban columns, in board order."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


PRIORITY_RANK = {
    TaskPriority.LOW: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.HIGH: 2,
}


def normalize_due_date(value):
    # the form sends plain dates, the database hands back naive datetimes
    if value is None or value == "":
        return None
    if isinstance(value, str) and len(value) == 10:
        value = date.fromisoformat(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TaskFields(BaseModel):
    """Editable task fields, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value):
        return normalize_due_date(value)


class Task(TaskFields):
    """A persisted task. Records are immutable; changes produce copies."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)

    id: str = Field(alias="_id")
    owner: Optional[str] = Field(None, alias="user")

    def with_status(self, status: TaskStatus) -> "Task":
        return self.model_copy(update={"status": status})

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# Request bodies

def reject_control_chars(value: str) -> str:
    if any(unicodedata.category(ch) == "Cc" for ch in value):
        raise ValueError("Title must not contain control characters")
    return value


class TaskCreate(TaskFields):
    user: Optional[EmailStr] = None

    @field_validator("title")
    @classmethod
    def title_printable(cls, value: str) -> str:
        return reject_control_chars(value)


class TaskUpdate(TaskFields):
    id: str = Field(alias="_id")

    @field_validator("title")
    @classmethod
    def title_printable(cls, value: str) -> str:
        return reject_control_chars(value)


class TaskListRequest(BaseModel):
    user: Optional[EmailStr] = None


class TaskDeleteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")


# Responses

class TaskListResponse(BaseModel):
    success: bool = True
    tasks: List[Task]


class TaskEnvelope(BaseModel):
    success: bool = True
    task: Task


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
