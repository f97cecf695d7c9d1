from __future__ import annotations

import re

from ..config import ServicesConfig

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def escape_comment(value: str) -> str:
    """Make free text safe to embed in a ``/** */`` block.

    Comment delimiters are collapsed to ``*`` and continuation lines are
    stripped so the printer can re-indent them.
    """
    value = value.replace("*/", "*").replace("/*", "*")
    first, *rest = re.split(r"\r?\n", value)
    return "\n".join([first, *(line.strip() for line in rest)])


def escape_name(value: str) -> str:
    """Quote a property name that is not a valid identifier."""
    if _IDENTIFIER.match(value):
        return value
    return f"'{value}'"


def transform_service_name(name: str, services: ServicesConfig) -> str:
    """Apply the service class name template, e.g. ``User`` -> ``UserService``."""
    return services.name.replace("{{name}}", name)
