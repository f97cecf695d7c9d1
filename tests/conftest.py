from __future__ import annotations

from collections.abc import Callable

import pytest

from servicegen.config import GeneratorConfig
from servicegen.generation.file import TypeScriptFile
from servicegen.generation.names import TypeNameResolver
from servicegen.generation.services.context import ServiceContext
from servicegen.generation.types import process_types
from servicegen.ir import Client, Operation, OperationParameter, OperationResult, Service

ContextFactory = Callable[..., ServiceContext]


@pytest.fixture()
def get_user() -> Operation:
    return Operation(
        name="getUser",
        method="GET",
        path="/users/{id}",
        parameters=(OperationParameter(name="id", prop="id", location="path", required=True, type="string"),),
        results=(OperationResult(code=200, type="User", description="OK"),),
        service="User",
    )


@pytest.fixture()
def make_context() -> ContextFactory:
    """Build a context whose resolver knows the types of the given operations."""

    def factory(config: GeneratorConfig, *operations: Operation) -> ServiceContext:
        resolver = TypeNameResolver()
        client = Client(services=(Service(name="Default", operations=operations),))
        process_types(client, config, resolver, TypeScriptFile(name="types.gen"))
        return ServiceContext(config=config, resolver=resolver)

    return factory


@pytest.fixture()
def client_document() -> dict[str, object]:
    return {
        "models": [{"name": "User", "type": "{ id: string; name: string }"}],
        "services": [
            {
                "name": "User",
                "operations": [
                    {
                        "name": "getUser",
                        "method": "get",
                        "path": "/users/{id}",
                        "parameters": [{"name": "id", "in": "path", "required": True, "type": "string"}],
                        "results": [{"code": 200, "type": "User", "description": "OK"}],
                    }
                ],
            }
        ],
    }
