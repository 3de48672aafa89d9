from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest

from tests._fixtures.graph_builder import GraphBuilder


@pytest.fixture(autouse=True)
def _reset_controlgen_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("controlgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def graph() -> GraphBuilder:
    """Provide an empty declaration graph builder."""
    return GraphBuilder()


@pytest.fixture
def write_declarations(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write dedented declaration text under tmp_path and return its path."""

    def _write(content: str, filename: str = "winjs.d.ts") -> Path:
        path = tmp_path / filename
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write
