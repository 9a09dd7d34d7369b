import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from ..errors import EmptyTitle, UnknownTask, bad_request, not_found
from ..models import INT64_MAX, INT64_MIN, Task
from ..presets import apply_presets
from ..schemas.task import TaskCreate, TaskList, TaskUpdate
from ..store import TaskStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()

# Ids are int64 on the wire; anything wider is a malformed id, not a missing task.
TaskId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@router.get("/", response_model=TaskList)
def get_tasks(
    filter: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    store: TaskStore = Depends(get_store),
):
    """Get all tasks, optionally filtered and then sorted by named presets."""
    return TaskList(tasks=apply_presets(store.all(), filter, sort_by))


@router.post("/", response_model=Task)
def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task and return it with its assigned id."""
    try:
        created = store.create(task.title)
    except EmptyTitle as e:
        raise bad_request(str(e))
    logger.info("created task %d", created.id)
    return created


@router.api_route("/", methods=["PUT", "DELETE"])
def missing_task_id(request: Request):
    raise bad_request(f"{request.method} requires a task id")


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: TaskId, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    task = store.find(task_id)
    if task is None:
        raise not_found(task_id)
    return task


@router.put("/{task_id}")
def update_task(task_id: TaskId, task: TaskUpdate, store: TaskStore = Depends(get_store)):
    """Replace a specific task.

    The body must carry the full task, including an id equal to the path id.
    """
    if task.id != task_id:
        raise bad_request("inconsistent task IDs")
    if store.find(task_id) is None:
        raise not_found(task_id)

    try:
        store.update(task)
    except UnknownTask:
        # Deleted by a concurrent request since the lookup above.
        raise not_found(task_id)
    logger.info("updated task %d", task_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{task_id}")
def delete_task(task_id: TaskId, store: TaskStore = Depends(get_store)):
    """Delete a specific task."""
    try:
        store.delete(task_id)
    except UnknownTask:
        raise not_found(task_id)
    logger.info("deleted task %d", task_id)
    return Response(status_code=status.HTTP_200_OK)


@router.options("/{task_path:path}")
def options(task_path: str):
    """Answer OPTIONS without a body; CORS preflights never get this far."""
    return Response(status_code=status.HTTP_200_OK)
