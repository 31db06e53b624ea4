from typing import Any

from pydantic import BaseModel


def to_json(value: Any) -> Any:
    """Serialize DTOs (or lists of them) with their camelCase wire names."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value


def envelope(data: Any = None, message: str | None = None, error: str | None = None) -> dict[str, Any]:
    """Build the {data?, message?, error?} body. Absent keys are left out, not nulled."""
    body: dict[str, Any] = {}
    if data is not None:
        body["data"] = to_json(data)
    if message is not None:
        body["message"] = message
    if error is not None:
        body["error"] = error
    return body
