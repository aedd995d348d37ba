"""ToDo List Schemas: request envelope and response body for /lists/.

Invariants:
    - ToDoListNameRequest reads only Name, matched in any letter case
      ("Name", "name", "NAME"); when several keys match, the last one wins
    - Other fields are ignored
    - A missing Name decodes to "", so "absent" and "empty" look the same to handlers
    - Name must be a JSON string: numbers, null, objects fail validation
    - ToDoListResponse serializes to exactly {"Name": ..., "TaskNumber": ...}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, model_validator

from todolist.core.domain_types import ToDoList


class ToDoListNameRequest(BaseModel):
    """Body of POST /lists/ and PUT /lists/{list}/."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field("", alias="Name")

    @model_validator(mode="before")
    @classmethod
    def fold_name_key(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matches = [value for key, value in data.items() if key.lower() == "name"]
        return {"Name": matches[-1]} if matches else {}

    @classmethod
    def parse_name(cls, raw: bytes) -> tuple[str, ValidationError | None]:
        """Decode a raw body into the requested name.

        Returns ("", error) when the body is not a JSON object with a string Name.
        """
        try:
            return cls.model_validate_json(raw or b"").name, None
        except ValidationError as e:
            return "", e


class ToDoListResponse(BaseModel):
    """Public view of a ToDo list."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
    task_number: int = Field(alias="TaskNumber")

    @classmethod
    def from_domain(cls, todo_list: ToDoList) -> "ToDoListResponse":
        return cls(name=todo_list.name, task_number=todo_list.task_number)
