"""Declarative endpoint specifications."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...core.exceptions import MalformedEndpoint
from .headers import DerivedHeader, HeaderRule, StaticHeader, as_rule
from .uri import template_variables

HTTP_METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})


class ResponseFilter(str, Enum):
    """What a request function resolves with."""

    BODY = "body"  # decoded body only
    RAW = "raw"  # full Response (status, headers, body)


@dataclass(frozen=True)
class EndpointSpec:
    """Static description of one API operation.

    ``uri_vars`` lists the template placeholders in the order their values
    are passed to the request function. Header rules may be given as plain
    strings or callables; they are normalized to StaticHeader/DerivedHeader.
    """

    id: str
    method: str
    uri_template: str
    uri_vars: tuple[str, ...] = ()
    header_rules: Mapping[str, HeaderRule | str | Callable[[Any], str]] = field(
        default_factory=dict
    )
    response_filter: ResponseFilter = ResponseFilter.BODY
    follow_location: bool = False
    link_type: str | None = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise MalformedEndpoint(f"{self.id}: unsupported method {self.method!r}")
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "uri_vars", tuple(self.uri_vars))

        undeclared = [
            name for name in template_variables(self.uri_template) if name not in self.uri_vars
        ]
        if undeclared:
            raise MalformedEndpoint(
                f"{self.id}: template {self.uri_template!r} uses undeclared "
                f"variables {undeclared}"
            )

        try:
            rules: dict[str, StaticHeader | DerivedHeader] = {
                name: as_rule(value) for name, value in self.header_rules.items()
            }
        except TypeError as e:
            raise MalformedEndpoint(f"{self.id}: {e}") from e
        object.__setattr__(self, "header_rules", rules)
