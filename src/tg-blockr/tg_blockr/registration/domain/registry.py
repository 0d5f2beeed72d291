"""BlockRegistry Protocol — the host framework's global block registry, seen from a plugin."""

from typing import Protocol


class BlockRegistry(Protocol):
    """Structural interface of a host registry that accepts block constructors.

    Registering an existing ``uid`` with ``overwrite=True`` replaces the entry.
    """

    def register_block(
        self,
        ctor: str,
        name: str,
        description: str,
        uid: str,
        category: str,
        icon: str | None,
        package: str,
        overwrite: bool,
    ) -> None: ...
