from typing import List, NamedTuple


class FieldError(NamedTuple):
    field: str
    message: str


def require_non_empty(value: str, field: str, message: str) -> List[FieldError]:
    if len(value) < 1:
        return [FieldError(field, message)]
    return []
