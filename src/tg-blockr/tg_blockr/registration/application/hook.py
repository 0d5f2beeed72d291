"""register_tgdata_block — the explicit startup call that adds the block to a host registry."""

from tg_blockr.registration.domain.observer import RegistrationObserver
from tg_blockr.registration.domain.registration import BlockRegistration
from tg_blockr.registration.domain.registry import BlockRegistry
from tg_blockr.registration.infrastructure.observer import StructlogRegistrationObserver


def register_tgdata_block(
    registry: BlockRegistry | None,
    registration: BlockRegistration | None = None,
    observer: RegistrationObserver | None = None,
) -> bool:
    """
    Register the TG Data block with *registry*; return whether it succeeded.

    Hosts call this once during startup (it is also advertised under the
    ``blockr.blocks`` entry point group). Calling it again overwrites the
    previous entry. A missing registry, or any error raised while
    registering, is reported to the observer and never propagated.
    """
    registration = registration or BlockRegistration()
    observer = observer or StructlogRegistrationObserver()

    if registry is None:
        observer.registration_host_unavailable(uid=registration.uid)
        return False

    try:
        registry.register_block(
            ctor=registration.ctor,
            name=registration.name,
            description=registration.description,
            uid=registration.uid,
            category=registration.category,
            icon=registration.icon,
            package=registration.package,
            overwrite=registration.overwrite,
        )
    except Exception as exc:  # noqa: BLE001
        observer.registration_failed(uid=registration.uid, reason=str(exc))
        return False

    observer.block_registered(uid=registration.uid, package=registration.package)
    return True
