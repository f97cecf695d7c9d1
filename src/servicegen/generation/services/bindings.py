"""Consumer style bindings.

A binding decides, for one consumer style, how an operation is shaped and
called: its parameters, request options, return type and call statement. One
binding is chosen per generation run, so the parameter shape and the call
statement always come from the same style.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from ...config import StandaloneStyle
from ...ir import Operation
from ..compiler import (
    Constructor,
    Decorator,
    Expression,
    FunctionParameter,
    ImportSpec,
    ObjectLiteral,
    Property,
    ReturnCall,
    TypeExpression,
)
from ..names import (
    NameTransformer,
    operation_data_type_name,
    operation_error_type_name,
    operation_response_type_name,
)
from .comments import operation_comment
from .context import ServiceContext
from .options import request_options, standalone_request_options
from .params import options_parameters, positional_parameters, standalone_parameters
from .returns import PROMISE_WRAPPER, RESULT_WRAPPER, STREAM_WRAPPER, operation_return_type
from .statements import injected_statements, legacy_statements, reactive_statements, standalone_statements

FileImport = tuple[list[ImportSpec], str]


@dataclass(frozen=True)
class BoundOperation:
    """Everything needed to declare one operation as a function or method."""

    parameters: tuple[FunctionParameter, ...]
    return_type: TypeExpression | None
    statements: tuple[ReturnCall, ...]
    comment: tuple[str, ...]
    client_imports: tuple[str, ...] = ()


class OperationBinding(ABC):
    """Shapes operations for one consumer style."""

    is_static = False

    def __init__(self, ctx: ServiceContext) -> None:
        self.ctx = ctx

    def bind(self, operation: Operation) -> BoundOperation:
        options, client_imports = self.request_options(operation)
        return BoundOperation(
            parameters=tuple(self.parameters(operation)),
            return_type=self.return_type(operation),
            statements=tuple(self.statements(operation, options)),
            comment=tuple(operation_comment(self.ctx, operation)),
            client_imports=client_imports,
        )

    def required_types(self, operation: Operation) -> list[NameTransformer]:
        """Name transforms of the operation types this binding refers to."""
        transforms: list[NameTransformer] = []
        if operation.parameters:
            transforms.append(operation_data_type_name)
        if self.ctx.config.is_standalone:
            transforms.append(operation_error_type_name)
        if operation.results:
            transforms.append(operation_response_type_name)
        return transforms

    def constructor(self) -> Constructor | None:
        return None

    def decorator(self) -> Decorator | None:
        return None

    @abstractmethod
    def parameters(self, operation: Operation) -> list[FunctionParameter]: ...

    @abstractmethod
    def request_options(self, operation: Operation) -> tuple[Expression, tuple[str, ...]]: ...

    @abstractmethod
    def return_type(self, operation: Operation) -> TypeExpression | None: ...

    @abstractmethod
    def statements(self, operation: Operation, options: Expression) -> list[ReturnCall]: ...

    @abstractmethod
    def file_imports(self, client_imports: list[str]) -> list[FileImport]:
        """Runtime imports of the services file, in emission order."""


class StandaloneBinding(OperationBinding):
    is_static = True

    def parameters(self, operation: Operation) -> list[FunctionParameter]:
        return standalone_parameters(self.ctx, operation)

    def request_options(self, operation: Operation) -> tuple[Expression, tuple[str, ...]]:
        options = standalone_request_options(operation)
        return options.expression, options.client_imports

    def return_type(self, operation: Operation) -> TypeExpression | None:
        # Inferred from the client call.
        return None

    def statements(self, operation: Operation, options: Expression) -> list[ReturnCall]:
        return standalone_statements(self.ctx, operation, options)

    def file_imports(self, client_imports: list[str]) -> list[FileImport]:
        style = cast(StandaloneStyle, self.ctx.config.style)
        names = [ImportSpec("client"), ImportSpec("Options", as_type=True)]
        names.extend(ImportSpec(name) for name in dict.fromkeys(client_imports))
        return [(names, style.client)]


class LegacyBinding(OperationBinding):
    """``__request(OpenAPI, options)`` returning a ``CancelablePromise``."""

    is_static = True
    async_wrapper = PROMISE_WRAPPER

    def __init__(self, ctx: ServiceContext) -> None:
        super().__init__(ctx)
        self._parameters: Callable[[ServiceContext, Operation], list[FunctionParameter]] = (
            options_parameters if ctx.config.use_options else positional_parameters
        )

    def parameters(self, operation: Operation) -> list[FunctionParameter]:
        return self._parameters(self.ctx, operation)

    def request_options(self, operation: Operation) -> tuple[Expression, tuple[str, ...]]:
        return request_options(operation, self.ctx.config.use_options).to_expression(), ()

    def return_type(self, operation: Operation) -> TypeExpression | None:
        return operation_return_type(self.ctx, operation, self.async_wrapper)

    def statements(self, operation: Operation, options: Expression) -> list[ReturnCall]:
        return legacy_statements(options)

    def file_imports(self, client_imports: list[str]) -> list[FileImport]:
        imports = self._wrapper_imports()
        if self.ctx.config.full_response:
            imports.append(([ImportSpec(RESULT_WRAPPER, as_type=True)], "./core/ApiResult"))
        imports.extend(self._transport_imports())
        return imports

    def _wrapper_imports(self) -> list[FileImport]:
        return [([ImportSpec(PROMISE_WRAPPER, as_type=True)], "./core/CancelablePromise")]

    def _transport_imports(self) -> list[FileImport]:
        return [
            ([ImportSpec("OpenAPI")], "./core/OpenAPI"),
            ([ImportSpec("request", alias="__request")], "./core/request"),
        ]


class InjectedBinding(LegacyBinding):
    """Instance methods calling an injected ``BaseHttpRequest``."""

    is_static = False

    def statements(self, operation: Operation, options: Expression) -> list[ReturnCall]:
        return injected_statements(options)

    def constructor(self) -> Constructor | None:
        return Constructor(parameters=(_injected("httpRequest", "BaseHttpRequest"),))

    def _transport_imports(self) -> list[FileImport]:
        return [([ImportSpec("BaseHttpRequest", as_type=True)], "./core/BaseHttpRequest")]


class ReactiveBinding(LegacyBinding):
    """Angular services returning an ``Observable``."""

    is_static = False
    async_wrapper = STREAM_WRAPPER

    def statements(self, operation: Operation, options: Expression) -> list[ReturnCall]:
        return reactive_statements(options)

    def constructor(self) -> Constructor | None:
        return Constructor(parameters=(_injected("http", "HttpClient"),))

    def decorator(self) -> Decorator | None:
        provided_in = ObjectLiteral(entries=(Property(key="providedIn", value="root"),), multi_line=False)
        return Decorator(name="Injectable", args=(provided_in,))

    def _wrapper_imports(self) -> list[FileImport]:
        return [
            ([ImportSpec("Injectable")], "@angular/core"),
            ([ImportSpec("HttpClient")], "@angular/common/http"),
            ([ImportSpec(STREAM_WRAPPER, as_type=True)], "rxjs"),
        ]


def binding_for(ctx: ServiceContext) -> OperationBinding:
    """Pick the binding of the configured consumer style."""
    config = ctx.config
    if config.is_standalone:
        return StandaloneBinding(ctx)
    if config.is_reactive:
        return ReactiveBinding(ctx)
    if config.is_injected:
        return InjectedBinding(ctx)
    return LegacyBinding(ctx)


def _injected(name: str, type_name: str) -> FunctionParameter:
    return FunctionParameter(name=name, type=type_name, access_level="public", is_read_only=True)
