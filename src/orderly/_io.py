import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class GraphDocumentError(Exception):
    """Error in a TOML graph document."""


class GraphSettings(BaseModel):
    """The optional ``[graph]`` table of a graph document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    elements: list[str] | None = None
    include_dependencies: bool | None = None


class GraphDocument(BaseModel):
    """A dependency graph read from TOML.

    Example document::

        [graph]
        elements = ["app"]
        include_dependencies = true

        [dependencies]
        app = ["lib", "core"]
        lib = ["core"]

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    graph: GraphSettings = Field(default_factory=GraphSettings)
    dependencies: dict[str, list[str]] = Field(default_factory=dict)

    def seed_elements(self) -> list[str]:
        """Elements to sort: ``[graph].elements``, else every declared element."""
        if self.graph.elements is not None:
            return list(self.graph.elements)
        return list(self.dependencies)

    def dependencies_of(self, element: str) -> list[str]:
        """Direct dependencies of an element (empty when undeclared)."""
        return self.dependencies.get(element, [])


def parse_graph_document(contents: dict[str, Any], source: str = "<graph>") -> GraphDocument:
    """Validate parsed TOML contents as a graph document.

    Raises:
        GraphDocumentError: If the contents do not describe a graph.

    """
    try:
        return GraphDocument.model_validate(contents)
    except ValidationError as e:
        msg = f"Invalid graph document {source}: {e}"
        raise GraphDocumentError(msg) from e


def load_graph_document(path: Path | str) -> GraphDocument:
    """Load a graph document from a TOML file.

    Raises:
        GraphDocumentError: If the file is not valid TOML or not a graph.

    """
    path = Path(path)
    with path.open("rb") as f:
        try:
            contents = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {path}: {e}"
            raise GraphDocumentError(msg) from e

    document = parse_graph_document(contents, str(path))
    logger.debug(f"Loaded {len(document.dependencies)} elements from {path}")
    return document


def export_order_to_toml(order: Sequence[str], output_path: Path | str) -> None:
    """Export a flat ordering as ``order = [...]``."""
    output_path = Path(output_path)
    with output_path.open("wb") as f:
        tomli_w.dump({"order": list(order)}, f)

    logger.debug(f"Exported order to {output_path}")


def export_regions_to_toml(regions: Sequence[Sequence[str]], output_path: Path | str) -> None:
    """Export regions as an array of ``[[regions]]`` tables."""
    toml_data = {
        "regions": [{"index": i, "elements": list(region)} for i, region in enumerate(regions)],
    }

    output_path = Path(output_path)
    with output_path.open("wb") as f:
        tomli_w.dump(toml_data, f)

    logger.debug(f"Exported {len(regions)} regions to {output_path}")
