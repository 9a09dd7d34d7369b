from fastapi import HTTPException, status


class TaskError(Exception):
    """Base class for task store errors."""


class EmptyTitle(TaskError):
    """Raised when a task is created with an empty title."""

    def __init__(self):
        super().__init__("create: empty title")


class UnknownTask(TaskError):
    """Raised when an update or delete references a task that doesn't exist."""

    def __init__(self, op: str, task_id: int):
        super().__init__(f"{op}: unknown task {task_id}")
        self.task_id = task_id


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(task_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"task id: {task_id} doesn't exist",
    )
