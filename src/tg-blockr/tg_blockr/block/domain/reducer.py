"""Pure expression generation and state reduction for the TG Data block."""

from pydantic import BaseModel

from tg_blockr.block.domain.events import (
    AddLabelsToggled,
    BlockEvent,
    DataLakeToggled,
    DatasetSelected,
    ValidateToggled,
)
from tg_blockr.block.domain.expression import (
    CallExpression,
    EmptyFrameExpression,
    LoadExpression,
)
from tg_blockr.block.domain.loaders import LoaderResolver
from tg_blockr.block.domain.state import BlockState


class BlockUpdate(BaseModel, frozen=True):
    """The state after an event together with the expression derived from it."""

    state: BlockState
    expression: LoadExpression


def build_expression(state: BlockState, resolver: LoaderResolver) -> LoadExpression:
    """
    Derive the load expression for *state*.

    No dataset selected yields an empty-frame expression and the resolver is not
    consulted. In data lake mode the cache function receives only the dataset
    id; ``add_labels`` and ``validate_data`` are ignored. Otherwise the fetch
    function receives the dataset id plus both flags as keywords.
    """
    if not state.has_dataset:
        return EmptyFrameExpression()

    loaders = resolver.loaders_for(state.dataset)
    if state.use_data_lake:
        return CallExpression(function=loaders.cache_function, args=(state.dataset,))

    return CallExpression(
        function=loaders.fetch_function,
        args=(state.dataset,),
        kwargs={"add_labels": state.add_labels, "validate": state.validate_data},
    )


def apply_event(state: BlockState, event: BlockEvent) -> BlockState:
    """Return *state* with the single field addressed by *event* replaced."""
    match event:
        case DatasetSelected(value=value):
            return state.model_copy(update={"dataset": value})
        case DataLakeToggled(value=value):
            return state.model_copy(update={"use_data_lake": value})
        case AddLabelsToggled(value=value):
            return state.model_copy(update={"add_labels": value})
        case ValidateToggled(value=value):
            return state.model_copy(update={"validate_data": value})
    raise TypeError(f"Failed to apply event: unsupported event {event!r}")


def reduce(state: BlockState, event: BlockEvent, resolver: LoaderResolver) -> BlockUpdate:
    """Apply *event* to *state* and regenerate the expression from the result."""
    new_state = apply_event(state=state, event=event)
    return BlockUpdate(
        state=new_state, expression=build_expression(state=new_state, resolver=resolver)
    )
