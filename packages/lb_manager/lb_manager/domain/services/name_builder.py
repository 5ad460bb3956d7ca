"""Naming rules for load balancers.

A load balancer name is composed from an application name, an optional
stack and an optional detail, using the same convention as cluster and
auto-scaling group names:

    app                     no stack, no detail
    app-stack               stack only
    app-stack-detail        stack and detail
    app--detail             detail only

The name is the resource's identity and can never change after creation.
"""

from __future__ import annotations

import re

from lb_manager.domain.exceptions import ValidationError
from lb_manager.domain.validation import FieldError

SEPARATOR = "-"

# Shared with cluster and auto-scaling group names.
NAME_MAX_LENGTH = 96

NAME_TOO_LONG = "name.tooLong"

_STRICT_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")
_DETAIL_PATTERN = re.compile(r"[A-Za-z0-9-]+")

# Tokens that other naming conventions give a meaning to: push versions
# (v000-v999999), bare ordinals, and labeled variables such as c0 or d0.
_PUSH_TOKEN_PATTERN = re.compile(r"^v[0-9]{3,6}$")
_NUMERIC_TOKEN_PATTERN = re.compile(r"^[0-9]+$")
_LABELED_VARIABLE_PATTERN = re.compile(r"^[cdhpruwz]0")
_PUSH_SUFFIX_PATTERN = re.compile(r"-v[0-9]{3,6}$")


def check_strict_name(value: str | None) -> bool:
    """Return True if the value is non-empty and strictly alphanumeric."""
    return bool(value) and _STRICT_NAME_PATTERN.fullmatch(value) is not None


def check_name(value: str | None) -> bool:
    """Return True if the value is empty or strictly alphanumeric."""
    return not value or _STRICT_NAME_PATTERN.fullmatch(value) is not None


def check_detail(value: str | None) -> bool:
    """Return True if the value is empty or alphanumeric with hyphens."""
    return not value or _DETAIL_PATTERN.fullmatch(value) is not None


def uses_reserved_format(value: str | None) -> bool:
    """Check whether a name component contains a reserved token.

    Each hyphen-separated token is tested, so ``"blue-v001"`` is reserved
    because of its push-version token.

    Args:
        value: Name component to check

    Returns:
        True if any token would be mistaken for a version, ordinal or
        labeled variable when the full name is parsed later
    """
    if not value:
        return False
    for token in value.split(SEPARATOR):
        if not token:
            continue
        if (
            _PUSH_TOKEN_PATTERN.match(token)
            or _NUMERIC_TOKEN_PATTERN.match(token)
            or _LABELED_VARIABLE_PATTERN.match(token)
        ):
            return True
    return False


def compose_name(app_name: str, stack: str | None = None, detail: str | None = None) -> str:
    """Join the components without checking the length."""
    name = app_name
    if stack or detail:
        name += SEPARATOR + (stack or "")
    if detail:
        name += SEPARATOR + detail
    return name


def build_name(
    app_name: str,
    stack: str | None = None,
    detail: str | None = None,
    max_length: int = NAME_MAX_LENGTH,
) -> str:
    """Build the canonical load balancer name.

    Args:
        app_name: Registered application name
        stack: Stack component, may be empty
        detail: Detail component, may be empty
        max_length: Maximum allowed length of the complete name

    Returns:
        The composed name

    Raises:
        ValidationError: If the composed name is longer than max_length
    """
    name = compose_name(app_name, stack, detail)
    if len(name) > max_length:
        message = f"The complete load balancer name cannot exceed {max_length} characters"
        raise ValidationError(
            message,
            field="app_name",
            field_errors=[FieldError("app_name", NAME_TOO_LONG, message)],
            details={"name": name, "length": len(name), "max_length": max_length},
        )
    return name


def app_name_from_name(load_balancer_name: str) -> str:
    """Return the application component of a load balancer name."""
    return load_balancer_name.split(SEPARATOR, 1)[0]


def cluster_from_group_name(group_name: str) -> str:
    """Strip a trailing push-version suffix from an auto-scaling group name."""
    return _PUSH_SUFFIX_PATTERN.sub("", group_name)
