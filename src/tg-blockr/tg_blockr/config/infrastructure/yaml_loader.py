"""Reads a tg-blockr YAML file into a validated TgBlockrConfig."""

from collections import Counter
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tg_blockr.config.domain.config import TgBlockrConfig
from tg_blockr.config.domain.observer import ConfigObserver
from tg_blockr.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from tg_blockr.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Builds TgBlockrConfig objects from YAML files on disk."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> TgBlockrConfig:
        """
        Parse *path*, substitute ${ENV_VAR} references and validate the result.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: naming every unset ${ENV_VAR} the file references.
            ConfigValidationError: if the schema is violated, or a dataset id is
                declared twice or is on the loader denylist.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        _check_dataset_ids(cfg=cfg)
        self._observer.config_loaded(path=str(path), total_datasets=len(cfg.datasets))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}
    except FileNotFoundError:
        raise ConfigLoadError(path=path) from None


def _check_missing_env_vars(raw: Any) -> None:
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> TgBlockrConfig:
    try:
        return TgBlockrConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_dataset_ids(cfg: TgBlockrConfig) -> None:
    """Collect duplicate and denylisted dataset ids across ALL entries before raising."""
    counts = Counter(entry.dataset_id for entry in cfg.datasets)
    problems = [f"dataset '{d}' declared {n} times" for d, n in counts.items() if n > 1]
    denied = set(cfg.loaders.denylist)
    problems.extend(
        f"dataset '{d}' is on the loader denylist" for d in counts if d in denied
    )
    if problems:
        raise ConfigValidationError("; ".join(problems))
