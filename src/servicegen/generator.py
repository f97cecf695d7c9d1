from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .generation import TypeNameResolver, TypeScriptFile, process_services, process_types
from .ir import Client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputSpec:
    output_dir: Path
    services_name: str = "services.gen"
    types_name: str = "types.gen"


def generate_files(spec: OutputSpec, client: Client, config: GeneratorConfig) -> dict[str, TypeScriptFile]:
    """Build the types and services files without writing them."""
    resolver = TypeNameResolver()
    files = {
        "types": TypeScriptFile(name=spec.types_name),
        "services": TypeScriptFile(name=spec.services_name),
    }
    process_types(client, config, resolver, files["types"])
    process_services(client, config, resolver, files)
    return files


def generate_output(spec: OutputSpec, client: Client, config: GeneratorConfig) -> list[Path]:
    """Generate and write the output files, skipping empty ones.

    Returns:
        Paths of the written files
    """
    files = generate_files(spec, client, config)
    written: list[Path] = []
    for key, file in files.items():
        if file.is_empty():
            logger.info("skipping empty %s file", key)
            continue
        written.append(file.write(spec.output_dir))
    return written
