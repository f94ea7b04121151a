# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : model.py
#   file_relpath : src/leitstand/messages/model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Messages reported while processing a single request or operation.

Sections:
    * Message: immutable reported condition (severity, reason code, text, property).
    * MessageStats: aggregated per-severity counts.
    * Messages: per-request, insertion-ordered collection of messages.
    * errors / with_severity: canonical predicates for
      [`Messages.contains`][leitstand.messages.model.Messages.contains].
    * create_message: builds a message from a [`Reason`][leitstand.core.reason.Reason].

An operation is considered failed if and only if its `Messages` contain at
least one ERROR message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from leitstand.config.logging import get_logger
from leitstand.core.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from leitstand.config.logging import LeitstandLogger
    from leitstand.core.reason import Reason

    MessagePredicate = Callable[["Message"], bool]


logger: LeitstandLogger = get_logger(__name__)


@dataclass(frozen=True)
class Message:
    """A reported condition.

    Attributes:
        severity (Severity): Severity of the condition.
        reason (str): The 8 character reason code.
        message (str): The rendered message text.
        property_name (str | None): Name of the offending property, if any.
    """

    severity: Severity
    reason: str
    message: str
    property_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-friendly form used in API responses."""
        data: dict[str, Any] = {
            "severity": self.severity.value,
            "reason": self.reason,
            "message": self.message,
        }
        if self.property_name is not None:
            data["property"] = self.property_name
        return data


def create_message(reason: Reason, *args: object, property_name: str | None = None) -> Message:
    """Create a message for ``reason`` with the reason's severity and rendered text.

    Args:
        reason (Reason): The reason of the message.
        *args (object): Arguments of the reason's message template.
        property_name (str | None): Name of the offending property, if any.

    Returns:
        Message: The new message.
    """
    return Message(
        severity=reason.severity,
        reason=reason.reason_code,
        message=reason.get_message(*args),
        property_name=property_name,
    )


def errors() -> MessagePredicate:
    """Return a predicate selecting ERROR messages."""
    return with_severity(Severity.ERROR)


def with_severity(severity: Severity) -> MessagePredicate:
    """Return a predicate selecting messages of ``severity``."""
    return lambda message: message.severity == severity


@dataclass(frozen=True)
class MessageStats:
    """Aggregated counts for messages by severity."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of messages."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class Messages:
    """Insertion-ordered messages of one request or operation.

    A `Messages` instance is created when a request starts and discarded when
    it ends. Iteration yields a read-only snapshot; iterating again starts over.
    """

    items: list[Message] = field(default_factory=lambda: [])

    def add(self, message: Message) -> None:
        """Append ``message``.

        Args:
            message: The message to add.
        """
        self.items.append(message)
        logger.trace("Adding [%s] %s: %r", message.severity.value, message.reason, message.message)

    def contains(self, predicate: MessagePredicate) -> bool:
        """Return True if at least one message satisfies ``predicate``.

        Stops at the first match.
        """
        return any(predicate(message) for message in self.items)

    def has_errors(self) -> bool:
        """Return True if the operation failed, i.e. an ERROR message was reported."""
        return self.contains(errors())

    def is_empty(self) -> bool:
        return not self.items

    def size(self) -> int:
        return len(self.items)

    def stats(self) -> MessageStats:
        """Return per-severity counts for messages in this collection."""
        return compute_message_stats(self.items)

    def to_payload(self) -> list[dict[str, Any]]:
        """Return the ordered JSON-friendly list of messages for API responses."""
        return [message.to_dict() for message in self.items]

    def __iter__(self) -> Iterator[Message]:
        """Iterate over a snapshot of the messages in insertion order."""
        return iter(tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)


def compute_message_stats(messages: Iterable[Message]) -> MessageStats:
    """Return per-severity counts for an iterable of messages.

    Args:
        messages: The messages to count.

    Returns:
        Per-severity counts.
    """
    n_info = n_warning = n_error = 0
    for message in messages:
        if message.severity == Severity.INFO:
            n_info += 1
        elif message.severity == Severity.WARNING:
            n_warning += 1
        else:
            n_error += 1
    return MessageStats(n_info=n_info, n_warning=n_warning, n_error=n_error)
