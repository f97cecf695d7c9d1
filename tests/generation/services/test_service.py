from __future__ import annotations

from collections.abc import Callable

from servicegen.config import GeneratorConfig, InjectedStyle, LegacyStyle, ServicesConfig
from servicegen.generation.compiler import ClassDeclaration, ConstFunction, Constructor, Method
from servicegen.generation.services.bindings import binding_for
from servicegen.generation.services.context import ServiceContext
from servicegen.generation.services.service import process_service
from servicegen.ir import Operation, Service

ContextFactory = Callable[..., ServiceContext]

PING = Operation(name="ping", method="GET", path="/ping")


class TestProcessService:
    def test_functions(self, make_context: ContextFactory, get_user: Operation) -> None:
        binding = binding_for(make_context(GeneratorConfig(style=LegacyStyle()), get_user, PING))
        output = process_service(binding, Service(name="User", operations=(get_user, PING)))

        assert [type(declaration) for declaration in output.declarations] == [ConstFunction, ConstFunction]
        assert [declaration.name for declaration in output.declarations] == ["getUser", "ping"]
        assert output.imports == ["GetUserData", "GetUserResponse"]
        assert output.client_imports == []

    def test_static_class(self, make_context: ContextFactory, get_user: Operation) -> None:
        config = GeneratorConfig(style=LegacyStyle(), services=ServicesConfig(as_class=True, name="{{name}}Api"))
        binding = binding_for(make_context(config, get_user))
        output = process_service(binding, Service(name="User", operations=(get_user,)))

        (declaration,) = output.declarations
        assert isinstance(declaration, ClassDeclaration)
        assert declaration.name == "UserApi"
        assert declaration.decorator is None
        (method,) = declaration.members
        assert isinstance(method, Method)
        assert method.is_static

    def test_injected_class_starts_with_constructor(self, make_context: ContextFactory, get_user: Operation) -> None:
        config = GeneratorConfig(style=InjectedStyle(name="ApiClient"), services=ServicesConfig(as_class=True))
        binding = binding_for(make_context(config, get_user))
        output = process_service(binding, Service(name="User", operations=(get_user,)))

        (declaration,) = output.declarations
        assert isinstance(declaration, ClassDeclaration)
        assert declaration.name == "UserService"
        constructor, method = declaration.members
        assert isinstance(constructor, Constructor)
        assert isinstance(method, Method)
        assert not method.is_static

    def test_empty_service(self, make_context: ContextFactory) -> None:
        binding = binding_for(make_context(GeneratorConfig(style=LegacyStyle())))
        output = process_service(binding, Service(name="Empty"))
        assert output.declarations == []
        assert output.imports == []
