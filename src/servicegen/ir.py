"""Intermediate Representation (IR) for normalized client documents.

This module defines the records consumed by the generation modules. They are
built from an already parsed API description (see ``document.py``) and are
immutable once built.

Key classes:
- Client: Root container for services and models
- Service: A named group of operations
- Operation: One callable unit derived from an endpoint and method pair
- OperationParameter: A parameter of an operation, tagged with its location
- OperationResult / OperationError: Declared success results and errors
- Model: A named type, keyed for name resolution by its meta
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, cast

from .content import get_content
from .document import (
    ClientDocument,
    ErrorObject,
    JsonValue,
    ModelObject,
    OperationObject,
    ParameterObject,
    ResultObject,
    ServiceObject,
)
from .errors import SpecError

logger = logging.getLogger(__name__)

ParameterLocation = Literal["path", "query", "header", "cookie", "formData", "body"]

PARAMETER_LOCATIONS: tuple[str, ...] = ("path", "query", "header", "cookie", "formData", "body")

FORM_DATA_MEDIA_TYPE = "multipart/form-data"


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT = _NoDefault()
"""Marks a parameter without a default, since ``None`` is a valid default (``null``)."""


@dataclass(frozen=True)
class ModelMeta:
    """Key used by the naming resolver.

    Attributes:
        ref: Reference that identifies the owner of a name
        name: Base name before any transform is applied
    """

    ref: str
    name: str


@dataclass(frozen=True)
class Model:
    """A named type produced by the parsing layer.

    Attributes:
        name: The model name
        type: Pre-computed TypeScript type expression
        meta: Resolution key, or None for models that are not top-level
        description: Optional documentation
    """

    name: str
    type: str
    meta: ModelMeta | None = None
    description: str | None = None


@dataclass(frozen=True)
class OperationParameter:
    """A parameter of an operation.

    Attributes:
        name: Identifier used in generated code
        prop: Name of the parameter on the wire
        location: Where the parameter is sent
        required: Whether the caller must supply the parameter
        default: Default value, or NO_DEFAULT
        media_type: Media type of a body or form payload
        type: Pre-computed TypeScript type expression
        description: Optional documentation
        is_body: Whether this parameter is the request payload
    """

    name: str
    prop: str
    location: ParameterLocation
    required: bool = False
    default: object = NO_DEFAULT
    media_type: str | None = None
    type: str = "unknown"
    description: str | None = None
    is_body: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class OperationResult:
    code: int | str
    type: str
    description: str | None = None


@dataclass(frozen=True)
class OperationError:
    code: int | str
    description: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class Operation:
    """One callable unit of a service.

    Attributes:
        name: Identifier, unique within the generated surface
        method: Upper-case HTTP method
        path: URL template with ``{param}`` placeholders
        parameters: All parameters, in declaration order
        results: Declared success results
        errors: Declared errors
        response_header: Name of a header to return instead of the body
        deprecated: Whether the operation is deprecated
        summary: Short documentation
        description: Long documentation
        service: Name of the owning service
    """

    name: str
    method: str
    path: str
    parameters: tuple[OperationParameter, ...] = ()
    results: tuple[OperationResult, ...] = ()
    errors: tuple[OperationError, ...] = ()
    response_header: str | None = None
    deprecated: bool = False
    summary: str | None = None
    description: str | None = None
    service: str = ""

    @property
    def parameters_path(self) -> list[OperationParameter]:
        return self._located("path")

    @property
    def parameters_query(self) -> list[OperationParameter]:
        return self._located("query")

    @property
    def parameters_header(self) -> list[OperationParameter]:
        return self._located("header")

    @property
    def parameters_cookie(self) -> list[OperationParameter]:
        return self._located("cookie")

    @property
    def parameters_form(self) -> list[OperationParameter]:
        return self._located("formData")

    @property
    def parameters_body(self) -> OperationParameter | None:
        for parameter in self.parameters:
            if parameter.is_body:
                return parameter
        return None

    def _located(self, location: str) -> list[OperationParameter]:
        return [p for p in self.parameters if p.location == location and not p.is_body]


@dataclass(frozen=True)
class Service:
    name: str
    operations: tuple[Operation, ...] = ()


@dataclass(frozen=True)
class Client:
    """Root container produced by build_client() and consumed by generation."""

    services: tuple[Service, ...] = ()
    models: tuple[Model, ...] = field(default_factory=tuple)


def build_client(document: ClientDocument) -> Client:
    """Build the IR from a normalized client document.

    Args:
        document: A client document as returned by ``load_document``

    Returns:
        A Client with services and models in document order

    Raises:
        SpecError: If a service, operation or parameter lacks a required field
    """
    models = tuple(_build_model(model) for model in document.get("models", []))
    services = tuple(_build_service(service) for service in document.get("services", []))
    logger.debug("built %d services and %d models", len(services), len(models))
    return Client(services=services, models=models)


def _build_model(model: ModelObject) -> Model:
    name = _require(model, "name", "model")
    ref = model.get("$ref", f"#/components/schemas/{name}")
    return Model(
        name=name,
        type=model.get("type", "unknown"),
        meta=ModelMeta(ref=ref, name=name) if ref else None,
        description=model.get("description"),
    )


def _build_service(service: ServiceObject) -> Service:
    name = _require(service, "name", "service")
    operations = tuple(_build_operation(operation, name) for operation in service.get("operations", []))
    return Service(name=name, operations=operations)


def _build_operation(operation: OperationObject, service: str) -> Operation:
    name = _require(operation, "name", "operation")
    parameters = tuple(_build_parameter(param, name) for param in operation.get("parameters", []))
    if sum(1 for param in parameters if param.is_body) > 1:
        raise SpecError(f"Operation {name!r} declares more than one body parameter")
    return Operation(
        name=name,
        method=_require(operation, "method", f"operation {name!r}").upper(),
        path=_require(operation, "path", f"operation {name!r}"),
        parameters=parameters,
        results=tuple(_build_result(result) for result in operation.get("results", [])),
        errors=tuple(_build_error(error) for error in operation.get("errors", [])),
        response_header=operation.get("responseHeader") or None,
        deprecated=bool(operation.get("deprecated", False)),
        summary=operation.get("summary") or None,
        description=operation.get("description") or None,
        service=service,
    )


def _build_parameter(param: ParameterObject, operation: str) -> OperationParameter:
    """Build an OperationParameter from a parameter object.

    A parameter located ``in: body`` is the request payload. When it carries a
    raw ``content`` map, its media type is selected from that map, and a
    ``multipart/form-data`` payload is sent as form data.
    """
    name = _require(param, "name", f"parameter of {operation!r}")
    location = param.get("in", "")
    if location not in PARAMETER_LOCATIONS:
        raise SpecError(f"Parameter {name!r} of {operation!r} has invalid location {location!r}")

    is_body = location == "body"
    media_type = param.get("mediaType")
    if media_type is None and "content" in param:
        content = get_content(param["content"])
        media_type = content.media_type if content else None
    if is_body and media_type == FORM_DATA_MEDIA_TYPE:
        location = "formData"

    default: object = NO_DEFAULT
    if "default" in param:
        default = cast(JsonValue, param["default"])

    return OperationParameter(
        name=name,
        prop=param.get("prop", name),
        location=cast(ParameterLocation, location),
        required=bool(param.get("required", False)),
        default=default,
        media_type=media_type,
        type=param.get("type", "unknown"),
        description=param.get("description") or None,
        is_body=is_body,
    )


def _build_result(result: ResultObject) -> OperationResult:
    return OperationResult(
        code=result.get("code", 200),
        type=result.get("type", "unknown"),
        description=result.get("description") or None,
    )


def _build_error(error: ErrorObject) -> OperationError:
    if "code" not in error:
        raise SpecError("Operation error is missing 'code'")
    return OperationError(
        code=error["code"],
        description=error.get("description"),
        type=error.get("type"),
    )


def _require(obj: object, key: str, owner: str) -> str:
    value = obj.get(key) if isinstance(obj, dict) else None
    if not isinstance(value, str) or not value:
        raise SpecError(f"Missing or invalid {key!r} in {owner}")
    return value
