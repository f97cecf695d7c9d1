from .config import (
    ConsumerStyle,
    GeneratorConfig,
    InjectedStyle,
    LegacyStyle,
    ReactiveStyle,
    ServicesConfig,
    StandaloneStyle,
)
from .content import Content, get_content
from .errors import ConfigError, ServicegenError, SpecError
from .generation import TypeNameResolver, TypeScriptFile, process_services, process_types
from .generator import OutputSpec, generate_files, generate_output
from .ir import Client, Model, ModelMeta, Operation, OperationParameter, Service, build_client
from .loader import load_document

__all__ = [
    "ServicegenError",
    "SpecError",
    "ConfigError",
    "ConsumerStyle",
    "GeneratorConfig",
    "InjectedStyle",
    "LegacyStyle",
    "ReactiveStyle",
    "ServicesConfig",
    "StandaloneStyle",
    "Content",
    "get_content",
    "TypeNameResolver",
    "TypeScriptFile",
    "process_services",
    "process_types",
    "OutputSpec",
    "generate_files",
    "generate_output",
    "Client",
    "Model",
    "ModelMeta",
    "Operation",
    "OperationParameter",
    "Service",
    "build_client",
    "load_document",
]
