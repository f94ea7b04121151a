# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : templates.py
#   file_relpath : src/leitstand/core/templates.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Message templates keyed by reason code.

Each module ships its templates as a TOML document mapping 8-character reason
codes to message strings with positional ``{0}``, ``{1}``, ... placeholders:

```toml
VAL0001E = "Value required: {0}"
```

Bundles are package resources parsed with `tomlkit` and cached after the
first lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from leitstand.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from leitstand.config.logging import LeitstandLogger

logger: LeitstandLogger = get_logger(__name__)


def _argument_text(arg: object) -> str:
    try:
        return str(arg)
    except Exception:
        return object.__repr__(arg)


def fallback_message(code: str, args: Sequence[object]) -> str:
    """Render ``code`` followed by the bracketed argument list, e.g. ``VAL0001E[name]``."""
    return f"{code}[{', '.join(_argument_text(arg) for arg in args)}]"


@dataclass(frozen=True)
class MessageTemplates:
    """Immutable lookup table of message templates."""

    templates: Mapping[str, str] = field(default_factory=lambda: {})

    @classmethod
    def from_toml(cls, text: str) -> MessageTemplates:
        """Parse a TOML document of ``code = "template"`` pairs.

        Non-string values are ignored.

        Raises:
            TomlkitParseError: If ``text`` is not valid TOML.
        """
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data: Any = doc.unwrap()
        return cls({str(k): v for k, v in data.items() if isinstance(v, str)})

    def format(self, code: str, *args: object) -> str:
        """Substitute ``args`` into the template registered for ``code``.

        Never raises: a missing template or a failed substitution renders
        [`fallback_message`][leitstand.core.templates.fallback_message].
        """
        template = self.templates.get(code)
        if template is None:
            return fallback_message(code, args)
        try:
            return template.format(*args)
        except Exception:
            # any substitution failure, e.g. a format spec the argument does not support
            return fallback_message(code, args)

    def __contains__(self, code: object) -> bool:
        return code in self.templates

    def __len__(self) -> int:
        return len(self.templates)


EMPTY_TEMPLATES = MessageTemplates()


@lru_cache(maxsize=None)
def load_templates(package: str, name: str) -> MessageTemplates:
    """Load and cache a bundled template resource.

    Args:
        package (str): Package containing the resource, e.g. ``"leitstand.validation"``.
        name (str): Resource file name, e.g. ``"validation-messages.toml"``.

    Returns:
        MessageTemplates: The parsed templates; empty if the resource is
            missing or malformed, so that messages degrade to the fallback form.
    """
    try:
        text: str = files(package).joinpath(name).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as exc:
        logger.error("Cannot read message templates %s/%s: %s", package, name, exc)
        return EMPTY_TEMPLATES
    try:
        templates = MessageTemplates.from_toml(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding message templates %s/%s: %s", package, name, exc)
        return EMPTY_TEMPLATES
    logger.debug("Loaded %d message template(s) from %s/%s", len(templates), package, name)
    return templates
