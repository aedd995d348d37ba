"""Run the ToDo list API with uvicorn: `python -m todolist` or `todolist-api`."""

import uvicorn

from todolist.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "todolist.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
