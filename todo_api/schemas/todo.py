from typing import List

from pydantic import BaseModel

from todo_api.schemas.validation import FieldError, require_non_empty

TODO_TITLE_REQUIRED = "Todo title is required!"


class CreateUpdateTodo(BaseModel):
    title: str
    content: str

    def validate_fields(self) -> List[FieldError]:
        return require_non_empty(self.title, "title", TODO_TITLE_REQUIRED)


class TodoCreated(CreateUpdateTodo):
    creator: int


class TodoOut(TodoCreated):
    id: int
