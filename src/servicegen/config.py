"""Generator configuration.

The consumer style is a closed set of variants. Each variant carries only the
options that mean something for it, so combinations such as a custom client
name on the reactive client cannot be expressed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Union, cast

from .errors import ConfigError

LegacyClient = Literal["fetch", "xhr", "node", "axios"]
ResponseMode = Literal["body", "response"]

LEGACY_CLIENTS: tuple[str, ...] = ("fetch", "xhr", "node", "axios")
STANDALONE_CLIENT_PREFIX = "@hey-api/client-"
REACTIVE_CLIENT = "angular"
DEFAULT_SERVICE_NAME = "{{name}}Service"


@dataclass(frozen=True)
class StandaloneStyle:
    """Single options-object parameter, calls straight into a client package."""

    client: str = "@hey-api/client-fetch"


@dataclass(frozen=True)
class LegacyStyle:
    """Calls the generated ``__request`` helper with the shared ``OpenAPI`` config.

    ``use_options`` selects one ``data`` object parameter instead of one
    positional parameter per field.
    """

    client: LegacyClient = "fetch"
    use_options: bool = True


@dataclass(frozen=True)
class InjectedStyle:
    """Services receive a ``BaseHttpRequest`` handle from a named client class."""

    name: str
    client: LegacyClient = "fetch"
    use_options: bool = True


@dataclass(frozen=True)
class ReactiveStyle:
    """Angular services: injected ``HttpClient``, ``Observable`` return types."""

    use_options: bool = True


ConsumerStyle = Union[StandaloneStyle, LegacyStyle, InjectedStyle, ReactiveStyle]


@dataclass(frozen=True)
class ServicesConfig:
    """How services are emitted.

    Attributes:
        as_class: Emit one class per service instead of free functions
        response: "response" wraps results in ``ApiResult``
        name: Class name template with a ``{{name}}`` placeholder
    """

    as_class: bool = False
    response: ResponseMode = "body"
    name: str = DEFAULT_SERVICE_NAME


@dataclass(frozen=True)
class GeneratorConfig:
    style: ConsumerStyle
    services: ServicesConfig = field(default_factory=ServicesConfig)

    @property
    def is_standalone(self) -> bool:
        return isinstance(self.style, StandaloneStyle)

    @property
    def is_reactive(self) -> bool:
        return isinstance(self.style, ReactiveStyle)

    @property
    def is_injected(self) -> bool:
        return isinstance(self.style, InjectedStyle)

    @property
    def use_options(self) -> bool:
        if isinstance(self.style, StandaloneStyle):
            return True
        return self.style.use_options

    @property
    def full_response(self) -> bool:
        """Whether return types are wrapped in ``ApiResult``.

        Only object-parameter styles support the wrapper; standalone services
        have no declared return type at all.
        """
        if self.is_standalone:
            return False
        return self.use_options and self.services.response == "response"

    @classmethod
    def from_options(
        cls,
        client: str = "fetch",
        name: str | None = None,
        use_options: bool = True,
        as_class: bool = False,
        response: str = "body",
        service_name: str = DEFAULT_SERVICE_NAME,
    ) -> "GeneratorConfig":
        """Map the classic option set onto a consumer style.

        Raises:
            ConfigError: If the options do not describe exactly one style
        """
        style: ConsumerStyle
        if client.startswith(STANDALONE_CLIENT_PREFIX):
            if name:
                raise ConfigError(f"A custom client name is not supported with {client!r}")
            style = StandaloneStyle(client=client)
        elif client == REACTIVE_CLIENT:
            if name:
                raise ConfigError("A custom client name is not supported with the angular client")
            style = ReactiveStyle(use_options=use_options)
        elif client in LEGACY_CLIENTS:
            legacy_client = cast(LegacyClient, client)
            if name:
                style = InjectedStyle(name=name, client=legacy_client, use_options=use_options)
            else:
                style = LegacyStyle(client=legacy_client, use_options=use_options)
        else:
            raise ConfigError(f"Unknown client: {client!r}")

        if response not in ("body", "response"):
            raise ConfigError(f"Unknown services response mode: {response!r}")
        if "{{name}}" not in service_name:
            raise ConfigError(f"Service name template must contain '{{{{name}}}}': {service_name!r}")

        services = ServicesConfig(
            as_class=as_class,
            response=cast(ResponseMode, response),
            name=service_name,
        )
        return cls(style=style, services=services)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "GeneratorConfig":
        """Build a configuration from a JSON/YAML mapping.

        Recognized keys: ``client``, ``name``, ``useOptions`` and a ``services``
        object with ``asClass``, ``response`` and ``name``.
        """
        services = data.get("services", {})
        if not isinstance(services, Mapping):
            raise ConfigError("'services' must be an object")
        return cls.from_options(
            client=_get(data, "client", str, "fetch"),
            name=_get(data, "name", str, None),
            use_options=_get(data, "useOptions", bool, True),
            as_class=_get(services, "asClass", bool, False),
            response=_get(services, "response", str, "body"),
            service_name=_get(services, "name", str, DEFAULT_SERVICE_NAME),
        )


def _get(data: Mapping[str, object], key: str, kind: type, default: object) -> Any:
    value = data.get(key, default)
    if value is not None and not isinstance(value, kind):
        raise ConfigError(f"{key!r} must be of type {kind.__name__}")
    return value
