"""Translates raw UI input changes into typed block events."""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from tg_blockr.block.domain.events import INPUT_IDS, BlockEvent
from tg_blockr.block.infrastructure.errors import InvalidInputValueError, UnknownInputError

_EVENT_ADAPTER: TypeAdapter[BlockEvent] = TypeAdapter(BlockEvent)


def event_from_input(input_id: str, value: Any) -> BlockEvent:
    """
    Translate a UI input-change (input id and new value) into its BlockEvent.

    Raises:
        UnknownInputError: if input_id does not belong to the TG Data block.
        InvalidInputValueError: if value cannot be coerced to the input's type.
    """
    if input_id not in INPUT_IDS:
        raise UnknownInputError(input_id=input_id)
    try:
        return _EVENT_ADAPTER.validate_python({"input_id": input_id, "value": value})
    except ValidationError as exc:
        raise InvalidInputValueError(input_id=input_id, reason=str(exc)) from exc
