from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .compiler import Declaration, ImportSpec, render_declaration, render_imports

logger = logging.getLogger(__name__)

HEADER = "// This file is auto-generated by servicegen"

ImportLike = str | ImportSpec


@dataclass
class TypeScriptFile:
    """An output file: a header, import statements and declarations.

    Both ``add`` and ``add_import`` append; nothing is reordered or merged, so
    the printed file follows the order in which content was added.
    """

    name: str
    header: tuple[str, ...] = (HEADER,)
    _imports: list[tuple[tuple[ImportSpec, ...], str]] = field(default_factory=list, init=False)
    _declarations: list[Declaration] = field(default_factory=list, init=False)

    def add(self, *declarations: Declaration) -> None:
        self._declarations.extend(declarations)

    def add_import(self, imports: ImportLike | Sequence[ImportLike], module: str) -> None:
        items = [imports] if isinstance(imports, (str, ImportSpec)) else list(imports)
        specs = tuple(ImportSpec(name=item) if isinstance(item, str) else item for item in items)
        if not specs:
            return
        self._imports.append((specs, module))

    @property
    def declarations(self) -> list[Declaration]:
        return list(self._declarations)

    @property
    def imports(self) -> list[tuple[tuple[ImportSpec, ...], str]]:
        return list(self._imports)

    def is_empty(self) -> bool:
        return not self._declarations

    def get_name(self, with_extension: bool = True) -> str:
        return f"{self.name}.ts" if with_extension else self.name

    def to_string(self) -> str:
        lines = list(self.header)
        if lines:
            lines.append("")
        if self._imports:
            lines.extend(render_imports(specs, module) for specs, module in self._imports)
            lines.append("")
        for declaration in self._declarations:
            lines.extend(render_declaration(declaration))
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def write(self, directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.get_name()
        path.write_text(self.to_string(), encoding="utf-8")
        logger.info("wrote %s", path)
        return path
