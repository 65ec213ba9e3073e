"""Configuration for tree generation.

This module defines the Config and FormatConfig objects shared by the library
façade and the CLI, the validation applied to them, and loading of JSON or YAML
config files. Values are layered as defaults, then a config file, then command-line
flags that were given explicitly.
"""

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml

from dirtree.exceptions import ConfigError
from dirtree.file_system_tree.build_options import BuildOptions
from dirtree.types import OutputFormat, PathType, parse_node_fields

CONFIG_SUFFIXES = (".json", ".yaml", ".yml")


def parse_comma_separated(value: str) -> List[str]:
    """Split a comma-separated string, trimming items and dropping empty ones.

    Example:
        >>> parse_comma_separated(" .log, .tmp ,,")
        ['.log', '.tmp']
        >>> parse_comma_separated("")
        []
    """
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class FormatConfig:
    """Formatting options.

    Attributes:
        output_format: Format selector (``json``, ``yaml``, ``xml`` or ``txt``).
        output_path: Output file, or None for stdout. The format's extension is
            appended when missing.
        indent: Indentation width of the rendered output.
        exclude_node_fields: Node fields omitted from the output.
    """

    output_format: str = OutputFormat.JSON.value
    output_path: Optional[str] = None
    indent: int = 2
    exclude_node_fields: List[str] = field(default_factory=list)

    def get_output_path(self) -> Optional[Path]:
        """Return the output path carrying the format's extension, or None for stdout.

        The extension check is case-insensitive.

        Example:
            >>> FormatConfig(output_format="yaml", output_path="out/tree").get_output_path()
            PosixPath('out/tree.yaml')
            >>> FormatConfig(output_format="xml", output_path="tree.XML").get_output_path()
            PosixPath('tree.XML')
            >>> FormatConfig().get_output_path() is None
            True
        """
        if not self.output_path:
            return None
        extension = f".{self.output_format.lower()}"
        if self.output_path.lower().endswith(extension):
            return Path(self.output_path)
        return Path(self.output_path + extension)


@dataclass
class Config:
    """All options of one tree generation.

    Attributes:
        path: Root path to walk.
        max_depth: Maximum depth, -1 for unlimited.
        exclude_paths: Regular expressions of paths to omit.
        exclude_types: File extensions to omit.
        include_files: Whether files are included or only directories.
        follow_links: Whether symbolic links are followed.
        format: Formatting options.
    """

    path: str = "."
    max_depth: int = -1
    exclude_paths: List[str] = field(default_factory=list)
    exclude_types: List[str] = field(default_factory=list)
    include_files: bool = True
    follow_links: bool = False
    format: FormatConfig = field(default_factory=FormatConfig)

    def validate(self) -> None:
        """Check the configuration for consistency.

        Raises:
            ConfigError: If any option is invalid.

        Example:
            >>> Config(max_depth=-5).validate()
            Traceback (most recent call last):
                ...
            dirtree.exceptions.ConfigError: max depth cannot be less than -1
        """
        if not self.path:
            raise ConfigError("path cannot be empty")
        if self.max_depth < -1:
            raise ConfigError("max depth cannot be less than -1")
        if self.format.output_format.lower() not in {f.value for f in OutputFormat}:
            raise ConfigError(f"unsupported output format: {self.format.output_format}")
        if self.format.indent < 0:
            raise ConfigError("indent cannot be negative")
        try:
            parse_node_fields(self.format.exclude_node_fields)
        except ValueError as e:
            raise ConfigError(str(e))

    def to_build_options(self) -> BuildOptions:
        """Derive the BuildOptions of the tree builder from this configuration."""
        return BuildOptions(
            path=self.path,
            max_depth=self.max_depth,
            exclude_paths=tuple(self.exclude_paths),
            exclude_types=tuple(self.exclude_types),
            include_files=self.include_files,
            follow_links=self.follow_links,
        )


def _expect(value: Any, expected: type, key: str) -> Any:
    # bool is a subclass of int but never a valid depth or indent
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(f"'{key}' must be of type {expected.__name__}, got {type(value).__name__}")
    return value


def _string_list(value: Any, key: str) -> List[str]:
    if isinstance(value, str):
        return parse_comma_separated(value)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings or a comma-separated string")
    return list(value)


def _apply_format(target: FormatConfig, data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        if key == "type":
            target.output_format = _expect(value, str, "format.type")
        elif key == "output_path":
            target.output_path = None if value is None else _expect(value, str, "format.output_path")
        elif key == "indent":
            target.indent = _expect(value, int, "format.indent")
        elif key == "exclude_node_fields":
            target.exclude_node_fields = _string_list(value, "format.exclude_node_fields")
        else:
            raise ConfigError(f"Unknown config key: format.{key}")


def config_from_mapping(data: Mapping[str, Any], base: Optional[Config] = None) -> Config:
    """Apply the keys of a parsed config document on top of ``base``.

    Keys use the config-file names: ``path``, ``max_depth``, ``exclude_paths``,
    ``exclude_types``, ``include_files``, ``follow_links`` and a ``format`` mapping
    with ``type``, ``output_path``, ``indent`` and ``exclude_node_fields``. Keys
    that are absent keep the value from ``base``.

    Args:
        data: Parsed config document.
        base: Configuration to start from. Defaults to Config().

    Returns:
        A new Config; ``base`` is not modified.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.

    Example:
        >>> cfg = config_from_mapping({"max_depth": 2, "format": {"type": "yaml"}})
        >>> cfg.max_depth, cfg.format.output_format, cfg.include_files
        (2, 'yaml', True)
    """
    config = copy.deepcopy(base) if base is not None else Config()
    for key, value in data.items():
        if key == "path":
            config.path = _expect(value, str, key)
        elif key == "max_depth":
            config.max_depth = _expect(value, int, key)
        elif key in ("exclude_paths", "exclude_types"):
            setattr(config, key, _string_list(value, key))
        elif key in ("include_files", "follow_links"):
            setattr(config, key, _expect(value, bool, key))
        elif key == "format":
            _apply_format(config.format, _expect(value, dict, key))
        else:
            raise ConfigError(f"Unknown config key: {key}")
    return config


def load_config_file(config_path: PathType, base: Optional[Config] = None) -> Config:
    """Load a JSON or YAML config file on top of ``base``.

    Args:
        config_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.
        base: Configuration to start from. Defaults to Config().

    Returns:
        The resulting configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed, has an unknown extension,
            or contains invalid keys or values.
    """
    path = Path(config_path)
    suffix = path.suffix.lower()
    if suffix not in CONFIG_SUFFIXES:
        raise ConfigError(f"Unknown config format: {path.suffix or path.name}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error parsing config file {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")

    return config_from_mapping(data, base)
