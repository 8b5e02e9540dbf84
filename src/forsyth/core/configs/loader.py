"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from forsyth.core.configs.schema import ForsythConfig, config_from_dict, config_to_dict


def _apply_overrides(config: Any, overrides: list[str] | None) -> Any:
    """Merge dotlist overrides such as "check.fail_fast=true" into a config."""
    if not overrides:
        return config
    return OmegaConf.merge(config, OmegaConf.from_dotlist(overrides))


def load_config(config_path: str | Path, overrides: list[str] | None = None) -> DictConfig:
    """Load a configuration file with optional overrides.

    Args:
        config_path: Path to the YAML configuration file.
        overrides: Optional list of CLI-style overrides (e.g., ["check.fail_fast=true"]).

    Returns:
        Merged configuration as a DictConfig.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    return _apply_overrides(OmegaConf.load(config_path), overrides)


def load_forsyth_config(
    config_path: str | Path | None = None, overrides: list[str] | None = None
) -> ForsythConfig:
    """Load a typed ForsythConfig, falling back to defaults without a file.

    Args:
        config_path: Optional path to a YAML configuration file.
        overrides: Optional list of CLI-style overrides.

    Returns:
        ForsythConfig built from the merged configuration.
    """
    if config_path is not None:
        config = load_config(config_path, overrides)
    else:
        config = _apply_overrides(OmegaConf.create(config_to_dict(ForsythConfig())), overrides)

    data = OmegaConf.to_container(config, resolve=True)
    return config_from_dict(data if isinstance(data, dict) else {})


def save_config(config: DictConfig | ForsythConfig | dict[str, Any], path: str | Path) -> None:
    """Save a configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Path to save the configuration to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(config, ForsythConfig):
        config = config_to_dict(config)
    if isinstance(config, dict):
        config = OmegaConf.create(config)

    OmegaConf.save(config, path)
