"""Request options passed to the transport call of an operation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from ...ir import FORM_DATA_MEDIA_TYPE, Operation, OperationParameter
from ..compiler import Identifier, ObjectLiteral, Property, Spread
from ..escape import escape_name

FORM_DATA_SERIALIZER = "formDataBodySerializer"

Group = tuple[Property, ...]


@dataclass(frozen=True)
class RequestOptions:
    """Options object of a non-standalone request.

    Field order is the printed key order. Fields left as None are not printed,
    so an empty parameter group never shows up as an empty object.
    """

    method: str
    url: str
    path: Group | None = None
    cookies: Group | None = None
    headers: Group | None = None
    query: Group | None = None
    form_data: Identifier | Group | None = field(default=None, metadata={"key": "formData"})
    body: Identifier | None = None
    media_type: str | None = field(default=None, metadata={"key": "mediaType"})
    response_header: str | None = field(default=None, metadata={"key": "responseHeader"})
    errors: Group | None = None

    def to_expression(self) -> ObjectLiteral:
        entries: list[Property | Spread] = []
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                value = ObjectLiteral(entries=value)
            entries.append(Property(key=item.metadata.get("key", item.name), value=value))
        return ObjectLiteral(entries=tuple(entries))


@dataclass(frozen=True)
class StandaloneOptions:
    expression: ObjectLiteral
    client_imports: tuple[str, ...] = ()


def standalone_request_options(operation: Operation) -> StandaloneOptions:
    """Spread the caller's options and pin the URL.

    A pure ``multipart/form-data`` payload also spreads the form data body
    serializer, which then has to be imported from the client package.
    """
    entries: list[Property | Spread] = [Spread("options")]
    client_imports: list[str] = []

    media_types = [
        parameter.media_type
        for parameter in operation.parameters
        if parameter.location in ("body", "formData") and parameter.media_type
    ]
    distinct = list(dict.fromkeys(media_types))
    if distinct == [FORM_DATA_MEDIA_TYPE]:
        entries.append(Spread(FORM_DATA_SERIALIZER))
        client_imports.append(FORM_DATA_SERIALIZER)

    entries.append(Property(key="url", value=operation.path))
    return StandaloneOptions(expression=ObjectLiteral(entries=tuple(entries)), client_imports=tuple(client_imports))


def request_options(operation: Operation, use_options: bool) -> RequestOptions:
    """Build the options object for ``__request`` and ``httpRequest.request``.

    Args:
        operation: The operation to describe
        use_options: Whether values are read from the ``data`` object parameter
    """

    def group(parameters: list[OperationParameter]) -> Group | None:
        if not parameters:
            return None
        return tuple(_group_entry(parameter, use_options) for parameter in parameters)

    form_data: Identifier | Group | None = group(operation.parameters_form)
    body: Identifier | None = None
    body_parameter = operation.parameters_body
    if body_parameter is not None:
        reference = Identifier(_reference(body_parameter, use_options))
        if body_parameter.location == "formData":
            form_data = reference
        else:
            body = reference

    errors: Group | None = None
    if operation.errors:
        # Repeated codes keep their first position and the last description.
        descriptions: dict[str, str] = {}
        for error in operation.errors:
            descriptions[_error_key(error.code)] = error.description or ""
        errors = tuple(Property(key=key, value=value) for key, value in descriptions.items())

    return RequestOptions(
        method=operation.method,
        url=operation.path,
        path=group(operation.parameters_path),
        cookies=group(operation.parameters_cookie),
        headers=group(operation.parameters_header),
        query=group(operation.parameters_query),
        form_data=form_data,
        body=body,
        media_type=body_parameter.media_type if body_parameter else None,
        response_header=operation.response_header,
        errors=errors,
    )


def _reference(parameter: OperationParameter, use_options: bool) -> str:
    return f"data.{parameter.name}" if use_options else parameter.name


def _group_entry(parameter: OperationParameter, use_options: bool) -> Property:
    # Identical key and reference print as shorthand.
    return Property(key=escape_name(parameter.prop), value=Identifier(_reference(parameter, use_options)))


def _error_key(code: int | str) -> str:
    key = str(code)
    return key if key.isdigit() else escape_name(key)
