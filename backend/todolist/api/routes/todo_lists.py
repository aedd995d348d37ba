"""ToDo List Routes: CRUD handlers mapping HTTP requests onto the ToDoListModel.

Invariants:
    - A list name (path segment or body Name) is non-empty before any model call
    - Success bodies are the model's value serialized as JSON, no envelope
    - Failure bodies are short plain-text messages; model error detail is only logged
    - Status mapping: bad input 400; create failure 400; delete/update/get-one
      failure 404; get-all failure 422
    - Exactly one log line per request: ERROR on failure, INFO on success
    - No retries: a model failure is terminal for the request

Design Decisions:
    - Bodies read raw and decoded with ToDoListNameRequest.parse_name, so decode
      failures share the plain-text 400 path instead of FastAPI's JSON 422
    - {list_name:path} lets /lists// reach the handler as an empty name
    - Handlers catch ToDoListError only; anything else reaches the global 500 handler
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from todolist.core.errors import ToDoListError
from todolist.core.repository_protocols import ToDoListModel
from todolist.infrastructure.todo_list_repository import get_todo_list_model
from todolist.schemas.todo_list import ToDoListNameRequest, ToDoListResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/lists", tags=["lists"])

MISSING_NAME = "Missing ToDo list name"
MISSING_NAMES = "Missing ToDo list name or new list name"
NOT_FOUND = "ToDo list not found"
RETRIEVE_ALL_FAILED = "Error while retrieving ToDo list"

_PLAIN_TEXT_ERROR = {"content": {"text/plain": {}}}

# Starlette's name for 422 differs between releases
HTTP_422_UNPROCESSABLE = 422


def plain_error(message: str, status_code: int) -> PlainTextResponse:
    """Plain-text error body, newline-terminated, never sniffed as another type."""
    return PlainTextResponse(
        f"{message}\n",
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )


@router.post(
    "/", response_model=ToDoListResponse,
    responses={400: _PLAIN_TEXT_ERROR},
)
async def create_todo_list(
    request: Request, model: ToDoListModel = Depends(get_todo_list_model),
):
    """Create a ToDo list named by the body's Name field."""
    name, decode_error = ToDoListNameRequest.parse_name(await request.body())
    if not name:
        logger.error(
            f"create_todo_list: bad request received: {decode_error or 'empty name'}",
            extra={"operation": "create_todo_list"},
        )
        return plain_error(MISSING_NAME, status.HTTP_400_BAD_REQUEST)

    try:
        todo_list = await model.create_todo_list(name)
    except ToDoListError as e:
        logger.error(
            f"create_todo_list: error while creating ToDo list '{name}': {e}",
            extra={
                "operation": "create_todo_list", "list_name": name,
                "error_code": e.code,
            },
        )
        return plain_error(
            f"Error while creating ToDo list '{name}'",
            status.HTTP_400_BAD_REQUEST,
        )

    logger.info(
        f"create_todo_list: new ToDo list '{todo_list.name}' created",
        extra={"operation": "create_todo_list", "list_name": todo_list.name},
    )
    return ToDoListResponse.from_domain(todo_list)


@router.get("/", response_model=list[ToDoListResponse], responses={422: _PLAIN_TEXT_ERROR})
async def get_all_todo_lists(
    model: ToDoListModel = Depends(get_todo_list_model),
):
    """Return every ToDo list."""
    try:
        todo_lists = await model.get_all_todo_lists()
    except ToDoListError as e:
        logger.error(
            f"get_all_todo_lists: error while retrieving ToDo lists: {e}",
            extra={"operation": "get_all_todo_lists", "error_code": e.code},
        )
        return plain_error(RETRIEVE_ALL_FAILED, HTTP_422_UNPROCESSABLE)

    logger.info(
        f"get_all_todo_lists: retrieved {len(todo_lists)} ToDo lists",
        extra={"operation": "get_all_todo_lists", "list_count": len(todo_lists)},
    )
    return [ToDoListResponse.from_domain(t) for t in todo_lists]


@router.get(
    "/{list_name:path}/", response_model=ToDoListResponse,
    responses={400: _PLAIN_TEXT_ERROR, 404: _PLAIN_TEXT_ERROR},
)
async def get_todo_list(
    list_name: str, model: ToDoListModel = Depends(get_todo_list_model),
):
    """Return one ToDo list by name."""
    if not list_name:
        logger.error(
            "get_todo_list: bad request received, no list name provided",
            extra={"operation": "get_todo_list"},
        )
        return plain_error(MISSING_NAME, status.HTTP_400_BAD_REQUEST)

    try:
        todo_list = await model.get_todo_list(list_name)
    except ToDoListError as e:
        logger.error(
            f"get_todo_list: error while retrieving ToDo list '{list_name}': {e}",
            extra={
                "operation": "get_todo_list", "list_name": list_name,
                "error_code": e.code,
            },
        )
        return plain_error(NOT_FOUND, status.HTTP_404_NOT_FOUND)

    logger.info(
        f"get_todo_list: retrieved ToDo list '{list_name}' "
        f"with {todo_list.task_number} tasks",
        extra={
            "operation": "get_todo_list", "list_name": list_name,
            "task_number": todo_list.task_number,
        },
    )
    return ToDoListResponse.from_domain(todo_list)


@router.put(
    "/{list_name:path}/", response_model=ToDoListResponse,
    responses={400: _PLAIN_TEXT_ERROR, 404: _PLAIN_TEXT_ERROR},
)
async def update_todo_list(
    list_name: str,
    request: Request,
    model: ToDoListModel = Depends(get_todo_list_model),
):
    """Rename a ToDo list to the body's Name field."""
    new_name, decode_error = ToDoListNameRequest.parse_name(await request.body())
    if not list_name or not new_name:
        logger.error(
            "update_todo_list: bad request received, missing list name or new name"
            + (f": {decode_error}" if decode_error else ""),
            extra={"operation": "update_todo_list", "list_name": list_name or None},
        )
        return plain_error(MISSING_NAMES, status.HTTP_400_BAD_REQUEST)

    try:
        todo_list = await model.update_todo_list(list_name, new_name)
    except ToDoListError as e:
        logger.error(
            f"update_todo_list: error while renaming ToDo list '{list_name}' "
            f"to '{new_name}': {e}",
            extra={
                "operation": "update_todo_list", "list_name": list_name,
                "new_name": new_name, "error_code": e.code,
            },
        )
        return plain_error(NOT_FOUND, status.HTTP_404_NOT_FOUND)

    logger.info(
        f"update_todo_list: ToDo list '{list_name}' renamed to '{todo_list.name}', "
        f"{todo_list.task_number} tasks",
        extra={
            "operation": "update_todo_list", "list_name": list_name,
            "new_name": todo_list.name, "task_number": todo_list.task_number,
        },
    )
    return ToDoListResponse.from_domain(todo_list)


@router.delete(
    "/{list_name:path}/", response_model=ToDoListResponse,
    responses={400: _PLAIN_TEXT_ERROR, 404: _PLAIN_TEXT_ERROR},
)
async def delete_todo_list(
    list_name: str, model: ToDoListModel = Depends(get_todo_list_model),
):
    """Delete a ToDo list and return it as it was."""
    if not list_name:
        logger.error(
            "delete_todo_list: bad request received, no list name provided",
            extra={"operation": "delete_todo_list"},
        )
        return plain_error(MISSING_NAME, status.HTTP_400_BAD_REQUEST)

    try:
        todo_list = await model.delete_todo_list(list_name)
    except ToDoListError as e:
        logger.error(
            f"delete_todo_list: error while deleting ToDo list '{list_name}': {e}",
            extra={
                "operation": "delete_todo_list", "list_name": list_name,
                "error_code": e.code,
            },
        )
        return plain_error(
            f"Error while deleting ToDo list {list_name}",
            status.HTTP_404_NOT_FOUND,
        )

    logger.info(
        f"delete_todo_list: ToDo list '{todo_list.name}' deleted "
        f"with {todo_list.task_number} tasks",
        extra={
            "operation": "delete_todo_list", "list_name": todo_list.name,
            "task_number": todo_list.task_number,
        },
    )
    return ToDoListResponse.from_domain(todo_list)
