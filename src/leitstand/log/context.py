# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : context.py
#   file_relpath : src/leitstand/log/context.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Thread-scoped diagnostic context rendered by the ``%x`` pattern parameter.

Each thread accumulates its own space-delimited string of breadcrumbs
(transaction ids, tenant names, ...). Threads never see each other's context
and newly started threads begin with an empty context. The owning thread must
call [`clear`][leitstand.log.context.clear] before it is handed back to a pool;
[`scoped`][leitstand.log.context.scoped] does this for a block of code.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_local = threading.local()


def push(info: str | None) -> None:
    """Append ``info`` to the current thread's context.

    Empty and ``None`` values are ignored.

    Args:
        info (str | None): The breadcrumb to append.
    """
    if not info:
        return
    current: str = getattr(_local, "context", "")
    _local.context = f"{current} {info}" if current else info


def get_context() -> str:
    """Return the current thread's context, or an empty string."""
    return getattr(_local, "context", "")


def clear() -> None:
    """Reset the current thread's context."""
    _local.context = ""


@contextmanager
def scoped(*infos: str | None) -> Iterator[str]:
    """Push ``infos`` for the duration of a block and clear the context afterwards.

    Example:
        ```python
        with scoped(f"TID: {transaction_id}"):
            handle(request)
        ```

    Yields:
        str: The context string visible inside the block.
    """
    for info in infos:
        push(info)
    try:
        yield get_context()
    finally:
        clear()
