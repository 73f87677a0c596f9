"""
Configuration system for the SVG scanner.

Supports YAML and JSON configuration files for extending the allow-list
and choosing the output format. Extensions are additive: a configuration
file can permit more tags and attributes but cannot remove any of the
built-in ones, and remote-reference stripping cannot be switched off.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, asdict

import yaml


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".svgscanner.yaml",
    ".svgscanner.yml",
    ".svgscanner.json",
    "svgscanner.yaml",
    "svgscanner.yml",
    "svgscanner.json",
]

OUTPUT_FORMATS = ("json", "text", "sarif")


class ConfigError(Exception):
    """Raised when a configuration file is malformed."""


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: str = "json"  # json, text, sarif
    output_file: Optional[str] = None
    indent: int = 4
    color: bool = True


@dataclass
class ScanConfig:
    """
    Main configuration for the SVG scanner.

    Example YAML config:

    ```yaml
    policy:
      extra_tags:
        - foreignobject
      extra_attributes:
        - data-name

    output:
      format: json
      indent: 4
      color: true
    ```
    """
    extra_tags: List[str] = field(default_factory=list)
    extra_attributes: List[str] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanConfig":
        """Create config from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        data = dict(data)

        # Handle nested 'policy' section
        policy = data.pop("policy", None) or {}
        if not isinstance(policy, dict):
            raise ConfigError("'policy' must be a mapping")
        data.setdefault("extra_tags", policy.get("extra_tags", []))
        data.setdefault("extra_attributes", policy.get("extra_attributes", []))

        for key in ("extra_tags", "extra_attributes"):
            data[key] = _string_list(key, data[key])

        if "output" in data:
            data["output"] = _output_config(data["output"])

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def _string_list(key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def _output_config(value: Any) -> OutputConfig:
    if value is None:
        return OutputConfig()
    if not isinstance(value, dict):
        raise ConfigError("'output' must be a mapping")

    known_fields = {f.name for f in OutputConfig.__dataclass_fields__.values()}
    output = OutputConfig(**{k: v for k, v in value.items() if k in known_fields})

    if output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unknown output format: {output.format}")
    # bool is a subclass of int
    if isinstance(output.indent, bool) or not isinstance(output.indent, int) or output.indent < 0:
        raise ConfigError("'indent' must be a non-negative integer")
    if not isinstance(output.color, bool):
        raise ConfigError("'color' must be true or false")
    if output.output_file is not None and not isinstance(output.output_file, str):
        raise ConfigError("'output_file' must be a string")
    return output


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML and JSON formats.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    try:
        if path.suffix == ".json":
            data = json.loads(content)
        else:
            # YAML is a superset of JSON, so this covers unknown suffixes too.
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e

    return data or {}


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.is_file():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def load_scan_config(path: Optional[str] = None, start_dir: str = ".") -> ScanConfig:
    """
    Load a ScanConfig from a file or create a default one.

    If path is None, searches for a config file starting from start_dir.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return ScanConfig()

    return ScanConfig.from_dict(load_config(path))


def create_default_config() -> str:
    """
    Create a default configuration file content.
    """
    config = {
        "policy": {
            "extra_tags": [],
            "extra_attributes": [],
        },
        "output": {
            "format": "json",
            "indent": 4,
            "color": True,
        },
    }

    return yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
