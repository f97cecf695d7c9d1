from __future__ import annotations

from servicegen.config import GeneratorConfig, LegacyStyle, StandaloneStyle
from servicegen.generation.compiler import TypeAlias
from servicegen.generation.file import TypeScriptFile
from servicegen.generation.names import TypeNameResolver
from servicegen.generation.types import process_types
from servicegen.ir import (
    Client,
    Model,
    ModelMeta,
    Operation,
    OperationError,
    OperationParameter,
    OperationResult,
    Service,
)

LEGACY = GeneratorConfig(style=LegacyStyle())
STANDALONE = GeneratorConfig(style=StandaloneStyle())

CREATE_USER = Operation(
    name="createUser",
    method="POST",
    path="/users",
    parameters=(
        OperationParameter(
            name="requestBody", prop="body", location="body", required=True, type="User", is_body=True
        ),
        OperationParameter(name="x-trace", prop="x-trace", location="header", type="string"),
    ),
    results=(
        OperationResult(code=201, type="User"),
        OperationResult(code=200, type="User"),
    ),
    errors=(OperationError(code=400, type="BadRequest"), OperationError(code=500)),
)


def _declare(client: Client, config: GeneratorConfig) -> tuple[TypeScriptFile, TypeNameResolver]:
    resolver = TypeNameResolver()
    file = TypeScriptFile(name="types.gen")
    process_types(client, config, resolver, file)
    return file, resolver


class TestProcessTypes:
    def test_declares_models_then_operation_types(self) -> None:
        client = Client(
            models=(
                Model(
                    name="User",
                    type="{ id: string }",
                    meta=ModelMeta(ref="#/User", name="User"),
                    description="A user",
                ),
                Model(name="inline", type="string"),
            ),
            services=(Service(name="User", operations=(CREATE_USER,)),),
        )
        file, _ = _declare(client, LEGACY)
        assert file.declarations == [
            TypeAlias(name="User", type="{ id: string }", comment=("A user",)),
            TypeAlias(name="CreateUserData", type="{\n    requestBody: User;\n    'x-trace'?: string;\n}"),
            TypeAlias(name="CreateUserResponse", type="User"),
        ]

    def test_error_type_only_for_standalone(self) -> None:
        client = Client(services=(Service(name="User", operations=(CREATE_USER,)),))
        file, resolver = _declare(client, STANDALONE)
        names = [declaration.name for declaration in file.declarations]
        assert names == ["CreateUserData", "CreateUserError", "CreateUserResponse"]
        assert file.declarations[1] == TypeAlias(name="CreateUserError", type="BadRequest")
        assert not resolver.is_empty()

    def test_untyped_errors_become_unknown(self) -> None:
        operation = Operation(name="ping", method="GET", path="/ping", errors=(OperationError(code="default"),))
        file, _ = _declare(Client(services=(Service(name="Health", operations=(operation,)),)), STANDALONE)
        assert file.declarations == [TypeAlias(name="PingError", type="unknown")]

    def test_operation_without_types_declares_nothing(self) -> None:
        operation = Operation(name="ping", method="GET", path="/ping")
        file, resolver = _declare(Client(services=(Service(name="Health", operations=(operation,)),)), LEGACY)
        assert file.is_empty()
        assert resolver.is_empty()

    def test_operation_type_collides_with_model(self) -> None:
        client = Client(
            models=(Model(name="GetUserResponse", type="string", meta=ModelMeta(ref="#/R", name="GetUserResponse")),),
            services=(
                Service(
                    name="User",
                    operations=(
                        Operation(
                            name="getUser",
                            method="GET",
                            path="/user",
                            results=(OperationResult(code=200, type="User"),),
                        ),
                    ),
                ),
            ),
        )
        file, _ = _declare(client, LEGACY)
        assert [declaration.name for declaration in file.declarations] == ["GetUserResponse", "GetUserResponse2"]
