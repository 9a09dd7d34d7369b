from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Task(BaseModel):
    """Task model for todo items.

    Field order is the wire order of the JSON representation.
    `date` holds unix seconds; 0 means the task is unscheduled.
    Values are never coerced: `"0"` is not an id and `1.0` is not a priority.
    """

    id: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    title: StrictStr = ""
    date: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    note: StrictStr = ""
    priority: StrictInt = Field(default=0, ge=0, le=255)
    done: StrictBool = False
