from __future__ import annotations

from ...ir import Operation
from ..compiler import TypeExpression, basic, union
from ..names import operation_response_type_name
from .context import ServiceContext

RESULT_WRAPPER = "ApiResult"
PROMISE_WRAPPER = "CancelablePromise"
STREAM_WRAPPER = "Observable"


def operation_return_type(ctx: ServiceContext, operation: Operation, async_wrapper: str) -> TypeExpression:
    """Compose the declared return type of an operation.

    Layers are applied innermost first: the response union (``void`` without
    results), then ``ApiResult`` for full responses, then ``async_wrapper``.
    The full response wrapper applies to ``void`` as well.
    """
    return_type: TypeExpression = basic("void")
    if operation.results:
        return_type = union([ctx.type_name(operation, operation_response_type_name)])
    if ctx.config.full_response:
        return_type = basic(RESULT_WRAPPER, [return_type])
    return basic(async_wrapper, [return_type])
