"""Services file generation.

This module provides process_services(), which declares the operations of
every service, either as exported functions or as service classes, and adds
the imports those declarations need.

The shape of each declaration depends on the consumer style:
- standalone: ``(options?.client ?? client).get<...>({ ...options, url })``
- legacy: ``__request(OpenAPI, { method, url, ... })`` in a ``CancelablePromise``
- injected: ``this.httpRequest.request({ ... })`` on a ``BaseHttpRequest``
- reactive: ``__request(OpenAPI, this.http, { ... })`` in an ``Observable``
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ...config import GeneratorConfig
from ...ir import Client
from ..compiler import ImportSpec
from ..file import TypeScriptFile
from ..names import TypeNameResolver
from .bindings import OperationBinding, binding_for
from .context import ServiceContext, ServiceOutput
from .service import process_service

__all__ = [
    "OperationBinding",
    "ServiceContext",
    "ServiceOutput",
    "binding_for",
    "process_service",
    "process_services",
]

logger = logging.getLogger(__name__)


def process_services(
    client: Client,
    config: GeneratorConfig,
    resolver: TypeNameResolver,
    files: Mapping[str, TypeScriptFile],
) -> None:
    """Fill ``files["services"]`` with the declarations of every service.

    Args:
        client: Services and operations to declare
        config: Generator configuration
        resolver: Resolver holding the names registered by the types writer
        files: Output files; nothing happens without a ``services`` file
    """
    services_file = files.get("services")
    if services_file is None:
        return

    binding = binding_for(ServiceContext(config=config, resolver=resolver))
    imports: list[str] = []
    client_imports: list[str] = []

    for service in client.services:
        output = process_service(binding, service)
        services_file.add(*output.declarations)
        imports.extend(output.imports)
        client_imports.extend(output.client_imports)

    for names, module in binding.file_imports(client_imports):
        services_file.add_import(names, module)

    types_file = files.get("types")
    if types_file is not None and not types_file.is_empty():
        imported_types = [ImportSpec(name, as_type=True) for name in dict.fromkeys(imports)]
        services_file.add_import(imported_types, f"./{types_file.get_name(with_extension=False)}")

    logger.debug("declared %d services with %d type imports", len(client.services), len(set(imports)))
