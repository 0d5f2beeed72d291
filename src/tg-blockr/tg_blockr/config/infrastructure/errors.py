"""Errors raised while reading a tg-blockr config file."""

from pathlib import Path

from tg_blockr.core.errors import TgBlockrError


class MissingEnvVarsError(TgBlockrError):
    """A ${ENV_VAR} referenced by the config is unset. Lists every such variable."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            "Failed to load tg-blockr config: unset environment variables "
            + ", ".join(sorted(missing_vars))
        )


class ConfigValidationError(TgBlockrError):
    """The config parsed but its loaders, defaults or datasets are invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to validate tg-blockr config: {reason}")


class ConfigLoadError(TgBlockrError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load tg-blockr config: file not found: {path}")
