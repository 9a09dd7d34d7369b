from typing import List

from pydantic import BaseModel, StrictStr

from ..models import Task


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    A missing title decodes as the empty string and is rejected by the store.
    """
    title: StrictStr = ""


class TaskUpdate(Task):
    """Schema for replacing an existing task wholesale."""
    pass


class TaskList(BaseModel):
    """Envelope for the task listing."""
    tasks: List[Task]
