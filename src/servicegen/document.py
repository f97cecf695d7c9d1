from __future__ import annotations

from typing import TypedDict

# Type aliases for JSON-like values found in client documents
JsonPrimitive = str | int | float | bool | None
JsonValue = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]

SchemaObject = TypedDict(
    "SchemaObject",
    {
        "type": str,
        "format": str,
        "items": "SchemaObject",
        "default": JsonValue,
        "description": str,
        "$ref": str,
    },
    total=False,
)

MediaTypeObject = TypedDict(
    "MediaTypeObject",
    {
        "schema": SchemaObject,
    },
    total=False,
)

ParameterObject = TypedDict(
    "ParameterObject",
    {
        "name": str,
        # Wire name; defaults to "name" when omitted
        "prop": str,
        # "path" | "query" | "header" | "cookie" | "formData" | "body"
        "in": str,
        "required": bool,
        "default": JsonValue,
        "description": str,
        "type": str,
        "mediaType": str,
        # Raw content map of a request body; the media type is selected from it
        "content": dict[str, MediaTypeObject],
    },
    total=False,
)

ResultObject = TypedDict(
    "ResultObject",
    {
        "code": int | str,
        "type": str,
        "description": str,
    },
    total=False,
)

ErrorObject = TypedDict(
    "ErrorObject",
    {
        "code": int | str,
        "description": str,
        "type": str,
    },
    total=False,
)

OperationObject = TypedDict(
    "OperationObject",
    {
        "name": str,
        "method": str,
        "path": str,
        "summary": str,
        "description": str,
        "deprecated": bool,
        "responseHeader": str,
        "parameters": list[ParameterObject],
        "results": list[ResultObject],
        "errors": list[ErrorObject],
    },
    total=False,
)

ServiceObject = TypedDict(
    "ServiceObject",
    {
        "name": str,
        "operations": list[OperationObject],
    },
    total=False,
)

ModelObject = TypedDict(
    "ModelObject",
    {
        "name": str,
        "type": str,
        "$ref": str,
        "description": str,
    },
    total=False,
)

ClientDocument = TypedDict(
    "ClientDocument",
    {
        "services": list[ServiceObject],
        "models": list[ModelObject],
    },
    total=False,
)
