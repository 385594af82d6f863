"""
Base class and field decoding for webhook payloads.

Payload fields use the wire names. Missing or null fields decode to the
zero value of the field; a present field of the wrong JSON type is a
MalformedPayloadError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import asdict
from typing import Any, ClassVar, TypeVar

from uqpay.core.exceptions import MalformedPayloadError

T = TypeVar("T")

_JSON_TYPES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def json_type(value: Any) -> str:
    return _JSON_TYPES.get(type(value), type(value).__name__)


def require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedPayloadError(f"{what} must be a JSON object, got {json_type(value)}")
    return value


def _wrong_type(key: str, expected: str, value: Any) -> MalformedPayloadError:
    return MalformedPayloadError(f"field {key!r} must be {expected}, got {json_type(value)}")


def get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _wrong_type(key, "a string", value)
    return value


def get_optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise _wrong_type(key, "a string", value)
    return value


def get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(key, "an integer", value)
    return value


def get_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _wrong_type(key, "a boolean", value)
    return value


def get_str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise _wrong_type(key, "an array of strings", value)
    return list(value)


def get_str_map(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise _wrong_type(key, "an object of strings", value)
    return dict(value)


def get_object(
    data: dict[str, Any], key: str, decode: Callable[[dict[str, Any]], T]
) -> T | None:
    value = data.get(key)
    if value is None:
        return None
    return decode(require_object(value, f"field {key!r}"))


def get_object_list(
    data: dict[str, Any], key: str, decode: Callable[[dict[str, Any]], T]
) -> list[T]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _wrong_type(key, "an array", value)
    return [decode(require_object(item, f"item of {key!r}")) for item in value]


class WebhookPayload(ABC):
    """
    Base for the typed ``data`` of a webhook event.

    Subclasses are dataclasses that declare the event types they accept
    (the discriminator set) and a human-readable category used in errors.
    """

    EVENT_TYPES: ClassVar[frozenset[str]] = frozenset()
    CATEGORY: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookPayload:
        """Decode the event data object."""
        ...

    @classmethod
    def accepts(cls, event_type: str) -> bool:
        return event_type in cls.EVENT_TYPES

    def to_dict(self) -> dict[str, Any]:
        """Return the payload in its wire shape."""
        return asdict(self)  # type: ignore[call-overload]
