"""Structlog implementation of the RegistrationObserver port."""

import structlog


class StructlogRegistrationObserver:
    """Delegates registration domain events to structlog.

    Satisfies the RegistrationObserver protocol structurally. Failures are
    logged at debug level only; they never reach the host.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def block_registered(self, uid: str, package: str) -> None:
        self._log.info("registration.block_registered", uid=uid, package=package)

    def registration_host_unavailable(self, uid: str) -> None:
        self._log.debug("registration.host_unavailable", uid=uid)

    def registration_failed(self, uid: str, reason: str) -> None:
        self._log.debug("registration.failed", uid=uid, reason=reason)
