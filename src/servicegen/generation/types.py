from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import GeneratorConfig
from ..ir import Client, Model, Operation
from .compiler import TypeAlias
from .escape import escape_comment, escape_name
from .file import TypeScriptFile
from .names import (
    TypeNameResolver,
    operation_data_type_name,
    operation_error_type_name,
    operation_meta,
    operation_response_type_name,
)

logger = logging.getLogger(__name__)


def process_types(
    client: Client,
    config: GeneratorConfig,
    resolver: TypeNameResolver,
    types_file: TypeScriptFile,
) -> None:
    """Register type names and declare them in the types file.

    Models come first so that operation types yield on name collisions. Type
    expressions are taken as given by the parsing layer.
    """
    for model in client.models:
        _process_model(model, resolver, types_file)

    for service in client.services:
        for operation in service.operations:
            _process_operation(operation, config, resolver, types_file)
    logger.debug("declared %d types in %s", len(types_file.declarations), types_file.get_name())


def _process_model(model: Model, resolver: TypeNameResolver, types_file: TypeScriptFile) -> None:
    # Only top-level models get a declaration of their own.
    if model.meta is None:
        return
    name = resolver.set_unique_type_name(model.meta)
    comment = (escape_comment(model.description),) if model.description else ()
    types_file.add(TypeAlias(name=name, type=model.type, comment=comment))


def _process_operation(
    operation: Operation,
    config: GeneratorConfig,
    resolver: TypeNameResolver,
    types_file: TypeScriptFile,
) -> None:
    meta = operation_meta(operation)
    if operation.parameters:
        name = resolver.set_unique_type_name(meta, operation_data_type_name)
        types_file.add(TypeAlias(name=name, type=_data_type(operation)))

    if config.is_standalone and operation.errors:
        name = resolver.set_unique_type_name(meta, operation_error_type_name)
        error_types = [error.type for error in operation.errors if error.type]
        types_file.add(TypeAlias(name=name, type=_union(error_types)))

    if operation.results:
        name = resolver.set_unique_type_name(meta, operation_response_type_name)
        types_file.add(TypeAlias(name=name, type=_union([result.type for result in operation.results])))


def _data_type(operation: Operation) -> str:
    lines = ["{"]
    for parameter in operation.parameters:
        optional = "" if parameter.required else "?"
        lines.append(f"    {escape_name(parameter.name)}{optional}: {parameter.type};")
    lines.append("}")
    return "\n".join(lines)


def _union(types: Sequence[str]) -> str:
    unique = list(dict.fromkeys(types))
    if not unique:
        return "unknown"
    return " | ".join(unique)
