"""ConfigObserver adapter backed by structlog."""

import structlog


class StructlogConfigObserver:
    """Logs config events under the `config.` prefix."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, total_datasets: int) -> None:
        self._log.info("config.loaded", path=path, total_datasets=total_datasets)
