"""Observer port for the registration domain — defines events in domain language."""

from typing import Protocol


class RegistrationObserver(Protocol):
    def block_registered(self, uid: str, package: str) -> None: ...

    def registration_host_unavailable(self, uid: str) -> None: ...

    def registration_failed(self, uid: str, reason: str) -> None: ...
