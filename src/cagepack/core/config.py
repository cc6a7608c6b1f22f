"""
Configuration management for cagepack.

Run settings live in a ``SearchConfig`` dataclass, validated on construction
and loadable from a YAML file. Command-line flags override file values.
"""

import os
import yaml
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, fields
from pathlib import Path

from cagepack.core.hitmap import CELL_COUNT


# Cells per piece in the reference piece set
PIECE_SIZE = 7

TABLE_SUFFIXES = (".csv", ".xlsx")


@dataclass
class SearchConfig:
    """Configuration for a packing search run."""
    piece_count: int = 3
    workers: int = 1
    output_dir: Optional[str] = None
    run_name: str = "cage_search"
    results_table: Optional[str] = None
    render_dir: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.piece_count, bool) or not isinstance(self.piece_count, int) or self.piece_count <= 0:
            raise ValueError("piece_count must be a positive integer")
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers <= 0:
            raise ValueError("workers must be a positive integer")
        if self.output_dir is not None and not isinstance(self.output_dir, str):
            raise ValueError("output_dir must be a string")
        if not isinstance(self.run_name, str) or not self.run_name:
            raise ValueError("run_name must be a non-empty string")
        if self.results_table is not None:
            if not isinstance(self.results_table, str):
                raise ValueError("results_table must be a string")
            if Path(self.results_table).suffix.lower() not in TABLE_SUFFIXES:
                raise ValueError(f"results_table must end in one of {', '.join(TABLE_SUFFIXES)}")
        if self.render_dir is not None and not isinstance(self.render_dir, str):
            raise ValueError("render_dir must be a string")
        if not isinstance(self.verbose, bool):
            raise ValueError("verbose must be a boolean")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Create SearchConfig from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items()}

    def merged(self, **overrides: Any) -> "SearchConfig":
        """Copy with every non-None override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SearchConfig.from_dict(data)


def load_config(config_path: str) -> SearchConfig:
    """
    Load configuration from YAML file.

    The settings may sit at the top level or under a ``search:`` key.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        SearchConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If the file is empty or holds invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration file must hold a mapping")

    if "search" in data:
        data = data["search"] or {}

    try:
        return SearchConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "cagepack.yaml") -> SearchConfig:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default SearchConfig object
    """
    config = SearchConfig()

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump({"search": config.to_dict()}, f, default_flow_style=False, indent=2)

    return config


def validate_config(config: SearchConfig) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    issues = []

    if config.piece_count * PIECE_SIZE > CELL_COUNT:
        issues.append(
            f"WARNING: {config.piece_count} pieces of {PIECE_SIZE} cells cannot fit in "
            f"{CELL_COUNT} cells; no solutions will be reported"
        )

    cpus = os.cpu_count() or 1
    if config.workers > cpus:
        issues.append(f"WARNING: workers ({config.workers}) exceeds CPU count ({cpus})")

    if config.output_dir is not None and os.path.isfile(config.output_dir):
        issues.append(f"ERROR: output_dir is an existing file: {config.output_dir}")

    if config.render_dir is not None and os.path.isfile(config.render_dir):
        issues.append(f"ERROR: render_dir is an existing file: {config.render_dir}")

    return issues
