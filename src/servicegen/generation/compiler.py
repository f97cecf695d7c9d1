"""TypeScript declaration values and their printer.

Generation components describe their output with the frozen values defined
here. ``render_declaration`` turns a declaration into TypeScript source lines;
nothing else in the package formats TypeScript syntax.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from ..ir import NO_DEFAULT
from .escape import escape_name

INDENT = "    "


@dataclass(frozen=True)
class TypeNode:
    """A type reference with optional type arguments, e.g. ``Promise<T>``."""

    name: str
    args: tuple["TypeExpression", ...] = ()

    def render(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}<{', '.join(arg.render() for arg in self.args)}>"


@dataclass(frozen=True)
class UnionType:
    members: tuple["TypeExpression", ...]

    def render(self) -> str:
        if not self.members:
            return "never"
        return " | ".join(member.render() for member in self.members)


TypeExpression = Union[TypeNode, UnionType]


def basic(name: str, args: Sequence[TypeExpression] = ()) -> TypeNode:
    return TypeNode(name=name, args=tuple(args))


def union(members: Sequence[str | TypeExpression]) -> UnionType:
    return UnionType(members=tuple(basic(m) if isinstance(m, str) else m for m in members))


@dataclass(frozen=True)
class Identifier:
    """An expression printed verbatim, e.g. ``data.id``."""

    name: str


@dataclass(frozen=True)
class Spread:
    expression: str


@dataclass(frozen=True)
class Property:
    """An object literal entry. ``key`` is printed as given."""

    key: str
    value: "Expression"


@dataclass(frozen=True)
class ObjectLiteral:
    entries: tuple[Property | Spread, ...] = ()
    multi_line: bool = True


@dataclass(frozen=True)
class ArrayLiteral:
    items: tuple["Expression", ...] = ()


Expression = Union[Identifier, ObjectLiteral, ArrayLiteral, str, int, float, bool, None]


def to_expression(value: object) -> Expression:
    """Convert a JSON-like Python value to a literal expression."""
    if isinstance(value, dict):
        return ObjectLiteral(
            entries=tuple(Property(key=escape_name(str(k)), value=to_expression(v)) for k, v in value.items())
        )
    if isinstance(value, (list, tuple)):
        return ArrayLiteral(items=tuple(to_expression(item) for item in value))
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"Cannot convert {type(value).__name__} to an expression")


@dataclass(frozen=True)
class FunctionParameter:
    """A function or constructor parameter.

    ``is_required=None`` leaves the optional marker off, which is what a
    parameter with a default needs.
    """

    name: str
    type: str | None = None
    is_required: bool | None = None
    default: object = NO_DEFAULT
    access_level: str | None = None
    is_read_only: bool = False


@dataclass(frozen=True)
class ReturnCall:
    """``return callee<types>(args);``"""

    callee: str
    args: tuple[Expression, ...] = ()
    type_args: tuple[str, ...] = ()


Statement = ReturnCall


@dataclass(frozen=True)
class ConstFunction:
    """``export const name = (parameters): returnType => { statements };``"""

    name: str
    parameters: tuple[FunctionParameter, ...] = ()
    statements: tuple[Statement, ...] = ()
    return_type: TypeExpression | None = None
    comment: tuple[str, ...] = ()


@dataclass(frozen=True)
class Method:
    name: str
    parameters: tuple[FunctionParameter, ...] = ()
    statements: tuple[Statement, ...] = ()
    return_type: TypeExpression | None = None
    comment: tuple[str, ...] = ()
    access_level: str = "public"
    is_static: bool = False


@dataclass(frozen=True)
class Constructor:
    parameters: tuple[FunctionParameter, ...] = ()
    multi_line: bool = False


@dataclass(frozen=True)
class Decorator:
    name: str
    args: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ClassDeclaration:
    name: str
    members: tuple[Constructor | Method, ...] = ()
    decorator: Decorator | None = None


@dataclass(frozen=True)
class TypeAlias:
    """``export type name = type;``"""

    name: str
    type: str
    comment: tuple[str, ...] = ()


Declaration = Union[ConstFunction, ClassDeclaration, TypeAlias]


@dataclass(frozen=True)
class ImportSpec:
    name: str
    alias: str | None = None
    as_type: bool = False

    def render(self, type_prefix: bool) -> str:
        text = f"{self.name} as {self.alias}" if self.alias else self.name
        return f"type {text}" if type_prefix and self.as_type else text


def render_imports(imports: Sequence[ImportSpec], module: str) -> str:
    """Render one import statement; all-type imports use ``import type``."""
    if all(item.as_type for item in imports):
        names = ", ".join(item.render(type_prefix=False) for item in imports)
        return f"import type {{ {names} }} from '{module}';"
    names = ", ".join(item.render(type_prefix=True) for item in imports)
    return f"import {{ {names} }} from '{module}';"


def render_declaration(declaration: Declaration) -> list[str]:
    if isinstance(declaration, ConstFunction):
        return _render_const_function(declaration)
    if isinstance(declaration, ClassDeclaration):
        return _render_class(declaration)
    return _render_type_alias(declaration)


def render_comment(comment: Sequence[str], indent: str = "") -> list[str]:
    """Render a JSDoc block, or nothing when there are no lines."""
    lines: list[str] = []
    for entry in comment:
        lines.extend(entry.split("\n"))
    if not lines:
        return []
    body = [f"{indent} * {line}".rstrip() for line in lines]
    return [f"{indent}/**", *body, f"{indent} */"]


def render_expression(value: Expression, indent: str = "") -> str:
    if isinstance(value, Identifier):
        return value.name
    if isinstance(value, ObjectLiteral):
        return _render_object(value, indent)
    if isinstance(value, ArrayLiteral):
        return "[" + ", ".join(render_expression(item, indent) for item in value.items) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return _string_literal(value)
    return json.dumps(value)


def render_statement(statement: Statement, indent: str) -> str:
    type_args = f"<{', '.join(statement.type_args)}>" if statement.type_args else ""
    args = ", ".join(render_expression(arg, indent) for arg in statement.args)
    return f"{indent}return {statement.callee}{type_args}({args});"


def render_parameters(parameters: Sequence[FunctionParameter]) -> str:
    return ", ".join(_render_parameter(parameter) for parameter in parameters)


def _render_parameter(parameter: FunctionParameter) -> str:
    modifiers = []
    if parameter.access_level:
        modifiers.append(parameter.access_level)
    if parameter.is_read_only:
        modifiers.append("readonly")
    text = " ".join([*modifiers, parameter.name])
    if parameter.is_required is False:
        text += "?"
    if parameter.type is not None:
        text += f": {parameter.type}"
    if parameter.default is not NO_DEFAULT:
        text += f" = {render_expression(to_expression(parameter.default))}"
    return text


def _render_object(value: ObjectLiteral, indent: str) -> str:
    if not value.entries:
        return "{}"
    if not value.multi_line:
        entries = ", ".join(_render_entry(entry, indent) for entry in value.entries)
        return f"{{ {entries} }}"
    inner = indent + INDENT
    entries = ",\n".join(f"{inner}{_render_entry(entry, inner)}" for entry in value.entries)
    return f"{{\n{entries}\n{indent}}}"


def _render_entry(entry: Property | Spread, indent: str) -> str:
    if isinstance(entry, Spread):
        return f"...{entry.expression}"
    if isinstance(entry.value, Identifier) and entry.value.name == entry.key:
        return entry.key
    return f"{entry.key}: {render_expression(entry.value, indent)}"


def _string_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n").replace("\r", "\\r")
    return f"'{escaped}'"


def _signature(parameters: Sequence[FunctionParameter], return_type: TypeExpression | None) -> str:
    signature = f"({render_parameters(parameters)})"
    if return_type is not None:
        signature += f": {return_type.render()}"
    return signature


def _render_body(statements: Sequence[Statement], indent: str) -> list[str]:
    return [render_statement(statement, indent) for statement in statements]


def _render_const_function(declaration: ConstFunction) -> list[str]:
    signature = _signature(declaration.parameters, declaration.return_type)
    return [
        *render_comment(declaration.comment),
        f"export const {declaration.name} = {signature} => {{",
        *_render_body(declaration.statements, INDENT),
        "};",
    ]


def _render_class(declaration: ClassDeclaration) -> list[str]:
    lines: list[str] = []
    if declaration.decorator is not None:
        decorator = declaration.decorator
        args = ", ".join(render_expression(arg) for arg in decorator.args)
        lines.append(f"@{decorator.name}({args})")
    lines.append(f"export class {declaration.name} {{")
    for index, member in enumerate(declaration.members):
        if index:
            lines.append("")
        if isinstance(member, Constructor):
            lines.extend(_render_constructor(member))
        else:
            lines.extend(_render_method(member))
    lines.append("}")
    return lines


def _render_constructor(member: Constructor) -> list[str]:
    if not member.multi_line:
        return [f"{INDENT}constructor({render_parameters(member.parameters)}) {{ }}"]
    lines = [f"{INDENT}constructor("]
    lines.extend(f"{INDENT * 2}{_render_parameter(parameter)}," for parameter in member.parameters)
    lines.append(f"{INDENT}) {{ }}")
    return lines


def _render_method(member: Method) -> list[str]:
    modifiers = [member.access_level]
    if member.is_static:
        modifiers.append("static")
    signature = _signature(member.parameters, member.return_type)
    return [
        *render_comment(member.comment, INDENT),
        f"{INDENT}{' '.join(modifiers)} {member.name}{signature} {{",
        *_render_body(member.statements, INDENT * 2),
        f"{INDENT}}}",
    ]


def _render_type_alias(declaration: TypeAlias) -> list[str]:
    return [
        *render_comment(declaration.comment),
        f"export type {declaration.name} = {declaration.type};",
    ]
