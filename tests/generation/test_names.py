from __future__ import annotations

import pytest

from servicegen.generation.names import (
    TypeNameResolver,
    operation_data_type_name,
    operation_error_type_name,
    operation_meta,
    operation_response_type_name,
    pascal_case,
)
from servicegen.ir import ModelMeta, Operation


class TestPascalCase:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("getUser", "GetUser"),
            ("get_user", "GetUser"),
            ("list-HTTP_jobs", "ListHttpJobs"),
            ("getHTTPStatus", "GetHttpStatus"),
            ("v2Users", "V2Users"),
            ("Already", "Already"),
        ],
    )
    def test_converts(self, value: str, expected: str) -> None:
        assert pascal_case(value) == expected

    def test_operation_type_names(self) -> None:
        assert operation_data_type_name("getUser") == "GetUserData"
        assert operation_error_type_name("getUser") == "GetUserError"
        assert operation_response_type_name("getUser") == "GetUserResponse"


class TestTypeNameResolver:
    def test_lookup_without_registration_is_empty(self) -> None:
        resolver = TypeNameResolver()
        assert resolver.unique_type_name(ModelMeta(ref="#/User", name="User")) == ""
        assert resolver.unique_type_name(None) == ""
        assert resolver.is_empty()

    def test_registration_is_stable(self) -> None:
        resolver = TypeNameResolver()
        meta = ModelMeta(ref="#/User", name="User")
        assert resolver.set_unique_type_name(meta) == "User"
        assert resolver.set_unique_type_name(meta) == "User"
        assert resolver.unique_type_name(meta) == "User"
        assert not resolver.is_empty()

    def test_suffixes_collisions(self) -> None:
        resolver = TypeNameResolver()
        first = resolver.set_unique_type_name(ModelMeta(ref="#/a/User", name="User"))
        second = resolver.set_unique_type_name(ModelMeta(ref="#/b/User", name="User"))
        third = resolver.set_unique_type_name(ModelMeta(ref="#/c/User", name="User"))
        assert (first, second, third) == ("User", "User2", "User3")
        assert resolver.unique_type_name(ModelMeta(ref="#/c/User", name="User")) == "User3"

    def test_operation_types_yield_to_models(self) -> None:
        resolver = TypeNameResolver()
        operation = Operation(name="getUser", method="GET", path="/users")
        resolver.set_unique_type_name(ModelMeta(ref="#/components/schemas/GetUserResponse", name="GetUserResponse"))
        name = resolver.set_unique_type_name(operation_meta(operation), operation_response_type_name)
        assert name == "GetUserResponse2"
        assert resolver.unique_type_name(operation_meta(operation), operation_response_type_name) == name

    def test_suffixes_of_one_operation_resolve_independently(self) -> None:
        resolver = TypeNameResolver()
        meta = operation_meta(Operation(name="getUser", method="GET", path="/users"))
        resolver.set_unique_type_name(meta, operation_data_type_name)
        assert resolver.unique_type_name(meta, operation_data_type_name) == "GetUserData"
        assert resolver.unique_type_name(meta, operation_response_type_name) == ""
