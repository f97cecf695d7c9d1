from __future__ import annotations

import logging

from ...ir import Operation, Service
from ..compiler import ClassDeclaration, ConstFunction, Constructor, Method
from ..escape import transform_service_name
from ..names import operation_meta
from .bindings import OperationBinding
from .context import ServiceOutput

logger = logging.getLogger(__name__)


def process_service(binding: OperationBinding, service: Service) -> ServiceOutput:
    """Declare every operation of a service.

    Operations become exported arrow functions, or methods of one class per
    service when ``services.as_class`` is set. The output also lists the type
    names the declarations refer to, in first-use order.
    """
    ctx = binding.ctx
    output = ServiceOutput()
    logger.debug("processing service %s (%d operations)", service.name, len(service.operations))

    for operation in service.operations:
        output.imports.extend(_required_imports(binding, operation))

    if not ctx.config.services.as_class:
        for operation in service.operations:
            bound = binding.bind(operation)
            output.client_imports.extend(bound.client_imports)
            output.declarations.append(
                ConstFunction(
                    name=operation.name,
                    parameters=bound.parameters,
                    return_type=bound.return_type,
                    statements=bound.statements,
                    comment=bound.comment,
                )
            )
        return output

    members: list[Constructor | Method] = []
    constructor = binding.constructor()
    if constructor is not None:
        members.append(constructor)
    for operation in service.operations:
        bound = binding.bind(operation)
        output.client_imports.extend(bound.client_imports)
        members.append(
            Method(
                name=operation.name,
                parameters=bound.parameters,
                return_type=bound.return_type,
                statements=bound.statements,
                comment=bound.comment,
                is_static=binding.is_static,
            )
        )

    output.declarations.append(
        ClassDeclaration(
            name=transform_service_name(service.name, ctx.config.services),
            members=tuple(members),
            decorator=binding.decorator(),
        )
    )
    return output


def _required_imports(binding: OperationBinding, operation: Operation) -> list[str]:
    names = []
    for transform in binding.required_types(operation):
        name = binding.ctx.resolver.unique_type_name(operation_meta(operation), transform)
        if name:
            names.append(name)
    return names
