from __future__ import annotations

from ...ir import Operation
from ..compiler import Expression, Identifier, ReturnCall
from ..names import operation_error_type_name, operation_response_type_name
from .context import ServiceContext

CONFIG_OBJECT = Identifier("OpenAPI")
REQUEST_HELPER = "__request"


def standalone_statements(ctx: ServiceContext, operation: Operation, options: Expression) -> list[ReturnCall]:
    """Call the client method named after the HTTP verb.

    The caller may pass its own client in ``options.client``; the shared one
    is used otherwise.
    """
    error_type = ctx.type_name(operation, operation_error_type_name)
    response_type = ctx.type_name(operation, operation_response_type_name) if operation.results else "void"
    if error_type and response_type:
        type_args: tuple[str, ...] = (response_type, error_type)
    elif error_type:
        type_args = ("unknown", error_type)
    elif response_type:
        type_args = (response_type,)
    else:
        type_args = ()
    return [
        ReturnCall(
            callee=f"(options?.client ?? client).{operation.method.lower()}",
            args=(options,),
            type_args=type_args,
        )
    ]


def injected_statements(options: Expression) -> list[ReturnCall]:
    return [ReturnCall(callee="this.httpRequest.request", args=(options,))]


def reactive_statements(options: Expression) -> list[ReturnCall]:
    return [ReturnCall(callee=REQUEST_HELPER, args=(CONFIG_OBJECT, Identifier("this.http"), options))]


def legacy_statements(options: Expression) -> list[ReturnCall]:
    return [ReturnCall(callee=REQUEST_HELPER, args=(CONFIG_OBJECT, options))]
