"""URI template expansion for endpoint paths.

Templates use simple ``{name}`` placeholders where the name is made of ASCII
letters only, e.g. ``/documents/{id}`` or ``/folders/{id}/documents/{docId}``.
Values are substituted verbatim; callers supply URL-safe path segments.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from ...core.exceptions import MissingTemplateVariable

_PLACEHOLDER = re.compile(r"\{([A-Za-z]+)\}")


def template_variables(template: str) -> list[str]:
    """Return placeholder names in order of appearance."""
    return _PLACEHOLDER.findall(template)


def expand_uri_template(
    template: str,
    var_names: Sequence[str],
    values: Sequence[Any],
) -> str:
    """Populate a URI template with positional values.

    Args:
        template: Path template such as ``/documents/{id}``
        var_names: Placeholder names in the order values are passed
        values: Positional values; extra trailing values are ignored

    Returns:
        The expanded path

    Raises:
        MissingTemplateVariable: If a placeholder has no corresponding value

    Examples:
        >>> expand_uri_template("/documents/{id}", ["id"], [15])
        '/documents/15'
        >>> expand_uri_template("/catalog", [], [])
        '/catalog'
    """
    if not var_names:
        return template

    mapping = dict(zip(var_names, values, strict=False))

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in mapping:
            raise MissingTemplateVariable(name, template)
        return str(mapping[name])

    return _PLACEHOLDER.sub(substitute, template)
