# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : errors.py
#   file_relpath : src/leitstand/core/errors.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Exceptions carrying a reason code.

Usage:
    Raise these exceptions from services to report a condition identified by a
    [`Reason`][leitstand.core.reason.Reason]. The exception message is the
    rendered reason text. API layers translate them into a response with the
    class' HTTP ``status`` and a single ERROR [`Message`][leitstand.messages.model.Message]
    (see [`to_message`][leitstand.core.errors.LeitstandError.to_message]).
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from leitstand.core.severity import Severity
from leitstand.messages.model import Message

if TYPE_CHECKING:
    from leitstand.core.reason import Reason


class LeitstandError(Exception):
    """Base class for all reason-carrying errors.

    Args:
        reason (Reason): The reason of the fault.
        *args (object): Arguments of the reason's message template.
        cause (BaseException | None): The underlying error. When given, its text
            becomes the exception message.
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, reason: Reason, *args: object, cause: BaseException | None = None) -> None:
        message = str(cause) if cause is not None else reason.get_message(*args)
        super().__init__(message)
        self.reason = reason
        self.arguments = args
        self.__cause__ = cause

    @property
    def message(self) -> str:
        return str(self)

    def to_message(self) -> Message:
        """Return the ERROR message reported to API clients."""
        return Message(
            severity=Severity.ERROR,
            reason=self.reason.reason_code,
            message=self.message,
        )


class EntityNotFoundError(LeitstandError):
    """The requested entity does not exist."""

    status = HTTPStatus.NOT_FOUND


class ConflictError(LeitstandError):
    """The request conflicts with the current state of an entity."""

    status = HTTPStatus.CONFLICT


class UnprocessableEntityError(LeitstandError):
    """The submitted entity is well-formed but semantically invalid."""

    status = HTTPStatus.UNPROCESSABLE_ENTITY


class AccessDeniedError(LeitstandError):
    """The caller is not allowed to perform the operation."""

    status = HTTPStatus.FORBIDDEN


@dataclass(frozen=True)
class KeyValuePair:
    """A named key value of a violated unique key."""

    key: str
    value: object

    def __str__(self) -> str:
        return "null" if self.value is None else str(self.value)


def key(name: str, value: object) -> KeyValuePair:
    return KeyValuePair(name, value)


class UniqueKeyConstraintViolationError(ConflictError):
    """An entity with the same unique key already exists.

    The key values are the message arguments; their names are available as
    [`properties`][leitstand.core.errors.UniqueKeyConstraintViolationError.properties].
    """

    def __init__(self, reason: Reason, *keys: KeyValuePair) -> None:
        super().__init__(reason, *keys)
        self.properties: tuple[str, ...] = tuple(k.key for k in keys)
