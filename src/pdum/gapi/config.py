"""Generation settings stored as YAML.

A config file looks like::

    output: build
    origin: https://github.com/habemus-papadum/pdum_gapi
    preferred_only: true
    package: true
    apis:
      - homegraph:v1
      - apikeys
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from pdum.gapi.types import DEFAULT_ORIGIN

CONFIG_FILENAME = "gapi.yaml"


@dataclass
class GenerateConfig:
    """Settings for ``pdum_gapi generate``.

    Attributes
    ----------
    output : Path
        Directory generated modules are written to.
    origin : str
        Project URL mentioned in generated module headers and the index page.
    apis : list[str]
        APIs to generate, as ``name`` or ``name:version``.
    preferred_only : bool
        When generating everything, only take the preferred version of each API.
    package : bool
        Write an ``__init__.py`` into ``output`` so it can be imported as a package.
    """

    output: Path = Path("build")
    origin: str = DEFAULT_ORIGIN
    apis: list[str] = field(default_factory=list)
    preferred_only: bool = True
    package: bool = True


def get_config_dir() -> Path:
    """Get the per-user configuration directory."""
    return Path.home() / ".config" / "pdum_gapi"


def find_config(explicit: Optional[Path] = None) -> Optional[Path]:
    """Locate the config file: ``explicit``, ``./gapi.yaml``, then the per-user one.

    Raises:
        FileNotFoundError: If ``explicit`` is given but does not exist
    """
    if explicit is not None:
        if not explicit.exists():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return explicit

    for candidate in (Path.cwd() / CONFIG_FILENAME, get_config_dir() / "config.yaml"):
        if candidate.exists():
            return candidate
    return None


def load_config(path: Union[str, Path]) -> GenerateConfig:
    """Load a config file.

    Raises:
        ValueError: If the file is not a mapping or has unknown keys
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(GenerateConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    if "output" in data:
        data["output"] = Path(data["output"])
    if "apis" in data:
        data["apis"] = [str(api) for api in data["apis"] or []]
    return GenerateConfig(**data)


def save_config(config: GenerateConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as YAML and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    data["output"] = str(config.output)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    return path
