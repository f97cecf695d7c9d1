from __future__ import annotations

from dataclasses import dataclass, field

from ...config import GeneratorConfig
from ...ir import Operation
from ..compiler import Declaration
from ..names import NameTransformer, TypeNameResolver, operation_meta


@dataclass(frozen=True)
class ServiceContext:
    """Read-only inputs shared by every service component."""

    config: GeneratorConfig
    resolver: TypeNameResolver

    def type_name(self, operation: Operation, transform: NameTransformer) -> str:
        """Look up the registered name of an operation type, or ``""``."""
        return self.resolver.unique_type_name(operation_meta(operation), transform)


@dataclass
class ServiceOutput:
    """Output of one service.

    Attributes:
        declarations: Declarations to append to the services file, in order
        imports: Type names to import from the types file
        client_imports: Helper names to import from the standalone client package
    """

    declarations: list[Declaration] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    client_imports: list[str] = field(default_factory=list)
