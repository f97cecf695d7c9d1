from .file import TypeScriptFile
from .names import TypeNameResolver
from .services import process_services
from .types import process_types

__all__ = [
    "TypeNameResolver",
    "TypeScriptFile",
    "process_services",
    "process_types",
]
