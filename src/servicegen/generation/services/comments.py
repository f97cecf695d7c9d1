from __future__ import annotations

from ...ir import Operation
from ..escape import escape_comment
from .context import ServiceContext


def operation_comment(ctx: ServiceContext, operation: Operation) -> list[str]:
    """Build the JSDoc lines of an operation.

    Standalone services only carry the deprecation marker, summary and
    description. Other styles also document parameters, results and the
    ``ApiError`` thrown by the request helper.
    """
    lines = _headline(operation)
    if ctx.config.is_standalone:
        return lines

    if operation.parameters:
        if ctx.config.use_options:
            lines.append("@param data The data for the request.")
            lines.extend(
                _tag(f"@param data.{parameter.name}", parameter.description)
                for parameter in operation.parameters
            )
        else:
            lines.extend(
                _tag(f"@param {parameter.name}", parameter.description) for parameter in operation.parameters
            )

    lines.extend(_tag(f"@returns {result.type}", result.description) for result in operation.results)
    lines.append("@throws ApiError")
    return lines


def _headline(operation: Operation) -> list[str]:
    lines: list[str] = []
    if operation.deprecated:
        lines.append("@deprecated")
    if operation.summary:
        lines.append(escape_comment(operation.summary))
    if operation.description:
        lines.append(escape_comment(operation.description))
    return lines


def _tag(tag: str, text: str | None) -> str:
    return f"{tag} {escape_comment(text)}" if text else tag
