from __future__ import annotations

from collections.abc import Callable

from servicegen.config import GeneratorConfig, LegacyStyle, StandaloneStyle
from servicegen.generation.services.comments import operation_comment
from servicegen.generation.services.context import ServiceContext
from servicegen.ir import Operation, OperationParameter, OperationResult

ContextFactory = Callable[..., ServiceContext]

LIST_USERS = Operation(
    name="listUsers",
    method="GET",
    path="/users",
    summary="List users",
    description="Returns */ every user\n   in the directory",
    deprecated=True,
    parameters=(
        OperationParameter(name="limit", prop="limit", location="query", type="number", description="Page size"),
    ),
    results=(OperationResult(code=200, type="Array<User>", description="OK"),),
)


class TestOperationComment:
    def test_options_style_documents_data_fields(self, make_context: ContextFactory, get_user: Operation) -> None:
        ctx = make_context(GeneratorConfig(style=LegacyStyle()), get_user)
        assert operation_comment(ctx, get_user) == [
            "@param data The data for the request.",
            "@param data.id",
            "@returns User OK",
            "@throws ApiError",
        ]

    def test_positional_style_with_headline(self, make_context: ContextFactory) -> None:
        ctx = make_context(GeneratorConfig(style=LegacyStyle(use_options=False)), LIST_USERS)
        assert operation_comment(ctx, LIST_USERS) == [
            "@deprecated",
            "List users",
            "Returns * every user\nin the directory",
            "@param limit Page size",
            "@returns Array<User> OK",
            "@throws ApiError",
        ]

    def test_standalone_keeps_headline_only(self, make_context: ContextFactory) -> None:
        ctx = make_context(GeneratorConfig(style=StandaloneStyle()), LIST_USERS)
        assert operation_comment(ctx, LIST_USERS) == [
            "@deprecated",
            "List users",
            "Returns * every user\nin the directory",
        ]

    def test_operation_without_parameters_or_results(self, make_context: ContextFactory) -> None:
        ping = Operation(name="ping", method="GET", path="/ping")
        ctx = make_context(GeneratorConfig(style=LegacyStyle()), ping)
        assert operation_comment(ctx, ping) == ["@throws ApiError"]
