from __future__ import annotations

from ...ir import Operation
from ..compiler import FunctionParameter
from ..names import operation_data_type_name
from .context import ServiceContext


def standalone_parameters(ctx: ServiceContext, operation: Operation) -> list[FunctionParameter]:
    """A single ``options`` parameter typed ``Options<Data>``."""
    data_type = ctx.type_name(operation, operation_data_type_name)
    return [
        FunctionParameter(
            name="options",
            type=f"Options<{data_type}>" if data_type else "Options",
            is_required=_has_required(operation),
        )
    ]


def positional_parameters(ctx: ServiceContext, operation: Operation) -> list[FunctionParameter]:
    """One parameter per operation parameter, typed through the Data type.

    A parameter with a default is never marked optional.
    """
    data_type = ctx.type_name(operation, operation_data_type_name)
    return [
        FunctionParameter(
            name=parameter.name,
            type=f"{data_type}['{parameter.name}']",
            is_required=parameter.required or parameter.has_default,
            default=parameter.default,
        )
        for parameter in operation.parameters
    ]


def options_parameters(ctx: ServiceContext, operation: Operation) -> list[FunctionParameter]:
    """A single ``data`` parameter, defaulting to ``{}`` when nothing is required."""
    if not operation.parameters:
        return []
    data_type = ctx.type_name(operation, operation_data_type_name)
    if _has_required(operation):
        return [FunctionParameter(name="data", type=data_type)]
    return [FunctionParameter(name="data", type=data_type, default={})]


def _has_required(operation: Operation) -> bool:
    return any(parameter.required for parameter in operation.parameters)
