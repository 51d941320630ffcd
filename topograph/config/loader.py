"""Reading and writing run configs as YAML or JSON."""

import json
from pathlib import Path
from typing import IO, Any, Callable, Dict, Tuple, Union

import yaml

from topograph.config.schema import Config


def _dump_yaml(data: Dict[str, Any], stream: IO[str]) -> None:
    yaml.safe_dump(data, stream, default_flow_style=False, sort_keys=False)


def _dump_json(data: Dict[str, Any], stream: IO[str]) -> None:
    json.dump(data, stream, indent=2)


# suffix -> (reader, writer)
_FORMATS: Dict[str, Tuple[Callable[[IO[str]], Any], Callable[[Dict[str, Any], IO[str]], None]]] = {
    ".yaml": (yaml.safe_load, _dump_yaml),
    ".yml": (yaml.safe_load, _dump_yaml),
    ".json": (json.load, _dump_json),
}


def _format_for(path: Path):
    try:
        return _FORMATS[path.suffix.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported config format: {path.suffix or '(none)'}. "
            f"Use one of {', '.join(sorted(_FORMATS))}"
        ) from None


def config_from_data(data: Any, name: str = "topology") -> Config:
    """Turn a parsed document into a Config.

    A full run config has a ``topology`` section. A bare topology record
    (a mapping with a top-level ``type``, e.g. ``{type: torus, rows: 4}``)
    is accepted too and wrapped with default analysis settings.

    Raises:
        ValueError: If the document is not a mapping
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config document must be a mapping, got {type(data).__name__}")
    if "type" in data and "topology" not in data:
        return Config(name=name, topology=data)
    return Config(**data)


def load_config(config_path: Union[str, Path]) -> Config:
    """Load a run config, or a bare topology record, from YAML or JSON.

    Bare topology records take their run name from the file stem.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unsupported or the document is not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    reader, _ = _format_for(config_path)
    with open(config_path, "r", encoding="utf-8") as f:
        data = reader(f)

    try:
        return config_from_data(data, name=config_path.stem)
    except ValueError as e:
        raise ValueError(f"{config_path}: {e}") from e


def save_config(config: Config, output_path: Union[str, Path]) -> None:
    """Write ``config`` in the format implied by the file suffix."""
    output_path = Path(output_path)
    _, writer = _format_for(output_path)

    with open(output_path, "w", encoding="utf-8") as f:
        writer(config.model_dump(), f)
