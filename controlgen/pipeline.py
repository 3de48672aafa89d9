"""Pipeline orchestration: declaration file to rendered catalog."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import ControlGenConfig
from .environment import SourceText, TreeSitterProvider, TypeEnvironmentProvider
from .extraction import CatalogAssembler, catalog_to_literal
from .logging import get_logger
from .models import Catalog, TypeEnvironment
from .printer import render_assignment


class Pipeline:
    """Coordinates environment loading, catalog extraction and rendering."""

    def __init__(
        self,
        config: ControlGenConfig | None = None,
        provider: TypeEnvironmentProvider | None = None,
        assembler: CatalogAssembler | None = None,
    ) -> None:
        self.config = config or ControlGenConfig()
        self.provider = provider or TreeSitterProvider()
        self.assembler = assembler or CatalogAssembler(self.config)
        self.logger = get_logger("pipeline")

    def run(self, path: str | Path) -> str:
        """Return the rendered catalog for the declaration file at ``path``."""
        return self.render(self.extract(path))

    def extract(self, path: str | Path) -> Catalog:
        environment = self.load_environment(path)
        return self.assembler.assemble(environment)

    def load_environment(self, path: str | Path) -> TypeEnvironment:
        declaration_path = Path(path).expanduser().resolve()
        self.logger.info("Reading declarations from %s", declaration_path)
        sources: List[SourceText] = [
            SourceText(
                identifier=self.config.baseline.name,
                text=self.config.baseline.read_text(encoding="utf-8"),
            ),
            SourceText(
                identifier=str(declaration_path),
                text=declaration_path.read_text(encoding="utf-8"),
            ),
        ]
        return self.provider.load(sources)

    def render(self, catalog: Catalog, variable: Optional[str] = None) -> str:
        literal = catalog_to_literal(catalog)
        return render_assignment(variable or self.config.output_variable, literal)


__all__ = ["Pipeline"]
