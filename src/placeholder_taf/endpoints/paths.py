"""Path templates with ``{name}`` placeholders."""

from __future__ import annotations

import re


_PLACEHOLDER_RE = re.compile(r"\{([^{}/]+)\}")


def placeholders(template: str) -> list[str]:
    """Return placeholder names in the order they appear in ``template``."""
    return _PLACEHOLDER_RE.findall(template)


def expand_path(template: str, *params: object) -> str:
    """Substitute each placeholder with the matching param, in order.

    Params are stringified with ``str()`` and inserted verbatim; no
    percent-encoding is applied.

    Raises:
        ValueError: if the param count differs from the placeholder count.
    """
    names = placeholders(template)
    if len(names) != len(params):
        raise ValueError(
            f"Path {template!r} takes {len(names)} parameter(s), got {len(params)}"
        )
    values = iter(params)
    return _PLACEHOLDER_RE.sub(lambda _m: str(next(values)), template)
