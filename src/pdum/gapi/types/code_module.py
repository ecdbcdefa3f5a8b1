"""Generated module dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CodeModule:
    """Source of one generated client module.

    Attributes
    ----------
    name : str
        Python module name (e.g. ``"homegraph_v1"``).
    api_id : str
        Discovery id of the API (e.g. ``"homegraph:v1"``).
    source : str
        The module's Python source.
    """

    name: str
    api_id: str
    source: str

    @property
    def filename(self) -> str:
        return f"{self.name}.py"

    def write(self, directory: Path) -> Path:
        """Write the module into ``directory`` (created if needed) and return its path."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_text(self.source, encoding="utf-8")
        return path


__all__ = ["CodeModule"]
