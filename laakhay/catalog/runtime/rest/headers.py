"""Header rules and header composition.

An endpoint declares its extra headers as rules. A StaticHeader carries a
literal value; a DerivedHeader computes the value from the request payload
when the request is built.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from ...core.auth import AuthFlow
from ...core.config import DEFAULT_UPLOAD_TYPE, LINK_TARGETS


@dataclass(frozen=True)
class StaticHeader:
    value: str


@dataclass(frozen=True)
class DerivedHeader:
    derive: Callable[[Any], str]


HeaderRule = StaticHeader | DerivedHeader

# Unreserved characters left unescaped by RFC 5987 value encoding
_RFC5987_SAFE = "-_.!~"


def as_rule(value: HeaderRule | str | Callable[[Any], str]) -> HeaderRule:
    """Coerce a plain string or callable into a header rule."""
    if isinstance(value, (StaticHeader, DerivedHeader)):
        return value
    if isinstance(value, str):
        return StaticHeader(value)
    if callable(value):
        return DerivedHeader(value)
    raise TypeError(f"Unsupported header rule: {value!r}")


def resolve_rule(rule: HeaderRule, payload: Any = None) -> str:
    if isinstance(rule, StaticHeader):
        return rule.value
    if isinstance(rule, DerivedHeader):
        return str(rule.derive(payload))
    raise TypeError(f"Unsupported header rule: {rule!r}")


def compose_headers(rules: Mapping[str, HeaderRule], payload: Any = None) -> dict[str, str]:
    """Resolve header rules into a fresh header dict.

    Args:
        rules: Header name to rule mapping (left untouched)
        payload: Request payload handed to derived rules

    Returns:
        Header dict with every value resolved
    """
    return {name: resolve_rule(rule, payload) for name, rule in rules.items()}


def authorization_header(auth_flow: AuthFlow) -> dict[str, str]:
    """Bearer authorization header for the flow's current token."""
    token = auth_flow.get_token()
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def encode_rfc5987(value: str) -> str:
    """Percent-encode a header parameter value per RFC 5987.

    Examples:
        >>> encode_rfc5987("file name(1).pdf")
        'file%20name%281%29.pdf'
    """
    return quote(value, safe=_RFC5987_SAFE, encoding="utf-8")


def upload_headers(
    *,
    name: str,
    content_type: str | None,
    base_url: str,
    link_id: Any = None,
    link_type: str | None = None,
) -> dict[str, str]:
    """Headers describing a file upload.

    Args:
        name: File name sent in Content-Disposition
        content_type: Declared media type of the file, if any
        base_url: API base URL used to build the Link target
        link_id: Identifier of the parent resource, if any
        link_type: Parent resource kind, ``"group"`` or ``"document"``

    Returns:
        Content-Type, Content-Disposition and, when a known link target is
        given, a Link header
    """
    headers = {
        "Content-Type": content_type or DEFAULT_UPLOAD_TYPE,
        "Content-Disposition": f"attachment; filename*=UTF-8''{encode_rfc5987(name)}",
    }
    if link_type and link_id:
        prefix = LINK_TARGETS.get(link_type)
        # Unknown link types are ignored
        if prefix is not None:
            headers["Link"] = f'<{base_url}{prefix}{link_id}>; rel="{link_type}"'
    return headers
