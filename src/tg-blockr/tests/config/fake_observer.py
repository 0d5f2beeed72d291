"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, object]] = []

    def config_loaded(self, path: str, total_datasets: int) -> None:
        self.loaded.append({"path": path, "total_datasets": total_datasets})
