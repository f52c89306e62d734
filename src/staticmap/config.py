"""Configuration loading utilities."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from staticmap.hashing import HASHERS


@dataclass(frozen=True)
class BuildConfig:
    """Configuration for a table build.

    Attributes:
        expected_entries: Entry count used for capacity planning
        hasher: Registered hash function name ("splitmix" | "blake2b")
        seed: Hash seed (uint64)
        empty_key: Key rendered for unoccupied slots
        output: Artifact path; None writes to stdout
        log_file: Optional log file for the build
    """

    expected_entries: int = 0
    hasher: str = "splitmix"
    seed: int = 0
    empty_key: str = ""
    output: Optional[str] = None
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate parameters."""
        if isinstance(self.expected_entries, bool) or not isinstance(self.expected_entries, int):
            raise ValueError(
                f"expected_entries must be an integer, got {self.expected_entries!r}"
            )
        if self.expected_entries < 0:
            raise ValueError("expected_entries must be non-negative")
        if self.hasher not in HASHERS:
            raise ValueError(
                f"hasher must be one of {sorted(HASHERS)}, got {self.hasher!r}"
            )
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not (0 <= self.seed < 2**64):
            raise ValueError("seed must be uint64")
        if not isinstance(self.empty_key, str):
            raise ValueError(f"empty_key must be a string, got {self.empty_key!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuildConfig":
        """Build from a mapping, ignoring keys that are not fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the document is not a mapping
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return config


def load_build_config(config_path: Path, **overrides: Any) -> BuildConfig:
    """Load a BuildConfig from YAML, applying non-None overrides on top."""
    data = load_config(config_path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return BuildConfig.from_dict(data)
