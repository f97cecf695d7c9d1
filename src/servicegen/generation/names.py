"""Type naming for generated declarations.

Operation types are named after the operation with a fixed suffix, e.g. the
parameters of ``getUser`` become ``GetUserData``. The resolver keeps those
names unique across one generation run.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from ..ir import ModelMeta, Operation

logger = logging.getLogger(__name__)

NameTransformer = Callable[[str], str]

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def pascal_case(value: str) -> str:
    """Convert an identifier to PascalCase.

    Example:
        >>> pascal_case("getUser")
        'GetUser'
        >>> pascal_case("list-HTTP_jobs")
        'ListHttpJobs'
    """
    return "".join(word[0].upper() + word[1:].lower() for word in _WORD.findall(value))


def operation_data_type_name(name: str) -> str:
    return f"{pascal_case(name)}Data"


def operation_error_type_name(name: str) -> str:
    return f"{pascal_case(name)}Error"


def operation_response_type_name(name: str) -> str:
    return f"{pascal_case(name)}Response"


def operation_meta(operation: Operation) -> ModelMeta:
    # Operation names are unique, so the name doubles as the reference.
    return ModelMeta(ref=operation.name, name=operation.name)


@dataclass
class TypeNameResolver:
    """Hands out collision-free type names.

    Names are registered by the types writer with ``set_unique_type_name``.
    Every other component only looks names up with ``unique_type_name``, which
    returns an empty string when nothing was registered for the reference.

    Example:
        >>> resolver = TypeNameResolver()
        >>> resolver.set_unique_type_name(ModelMeta(ref="#/User", name="User"))
        'User'
        >>> resolver.set_unique_type_name(ModelMeta(ref="#/other/User", name="User"))
        'User2'
        >>> resolver.unique_type_name(ModelMeta(ref="#/missing", name="Missing"))
        ''
    """

    _types: dict[str, str] = field(default_factory=dict, init=False)

    def unique_type_name(self, meta: ModelMeta | None, transform: NameTransformer | None = None) -> str:
        if meta is None:
            return ""
        name, registered = self._find(meta, transform)
        return name if registered else ""

    def set_unique_type_name(self, meta: ModelMeta, transform: NameTransformer | None = None) -> str:
        name, registered = self._find(meta, transform)
        if not registered:
            self._types[name] = meta.ref
            logger.debug("registered type name %s for %s", name, meta.ref)
        return name

    def is_empty(self) -> bool:
        return not self._types

    def _find(self, meta: ModelMeta, transform: NameTransformer | None) -> tuple[str, bool]:
        base = transform(meta.name) if transform else meta.name
        name = base
        count = 1
        while name in self._types:
            if self._types[name] == meta.ref:
                return name, True
            count += 1
            name = f"{base}{count}"
        return name, False
