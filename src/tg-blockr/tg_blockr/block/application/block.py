"""TgDataBlock — holds block state and regenerates the load expression on every input change."""

from collections.abc import Mapping
from typing import Any

from tg_blockr.block.application.inputs import event_from_input
from tg_blockr.block.domain.expression import LoadExpression
from tg_blockr.block.domain.loaders import LoaderResolver
from tg_blockr.block.domain.observer import BlockObserver
from tg_blockr.block.domain.reducer import build_expression, reduce
from tg_blockr.block.domain.state import BlockState
from tg_blockr.block.domain.ui import InputSpec, build_inputs
from tg_blockr.catalog.domain.catalog import DatasetCatalog

BLOCK_CLASS = "tgdata_block"


class TgDataBlock:
    """A data block offering every dataset of a catalog through one dropdown.

    Each input change is handled to completion: the state is replaced, the
    expression recomputed and both reported to the observer. The block never
    executes its expression; the host engine evaluates it later.
    """

    block_class = BLOCK_CLASS

    def __init__(
        self,
        state: BlockState,
        catalog: DatasetCatalog,
        resolver: LoaderResolver,
        observer: BlockObserver,
    ) -> None:
        self._catalog = catalog
        self._resolver = resolver
        self._observer = observer
        self._state = state
        self._expression = build_expression(state=state, resolver=resolver)

    @classmethod
    def restore(
        cls,
        payload: Mapping[str, Any],
        catalog: DatasetCatalog,
        resolver: LoaderResolver,
        observer: BlockObserver,
    ) -> "TgDataBlock":
        """Rebuild a block from the payload returned by :meth:`serialize`.

        Raises:
            pydantic.ValidationError: if the payload does not describe a BlockState.
        """
        state = BlockState.model_validate(dict(payload))
        return cls(state=state, catalog=catalog, resolver=resolver, observer=observer)

    @property
    def state(self) -> BlockState:
        return self._state

    @property
    def expression(self) -> LoadExpression:
        return self._expression

    def handle_input(self, input_id: str, value: Any) -> LoadExpression:
        """
        Apply one UI input change and return the regenerated expression.

        Raises:
            UnknownInputError: if input_id is not one of the block's inputs.
            InvalidInputValueError: if value has the wrong type for the input.
        """
        event = event_from_input(input_id=input_id, value=value)
        update = reduce(state=self._state, event=event, resolver=self._resolver)
        self._state = update.state
        self._expression = update.expression

        self._observer.block_state_changed(input_id=input_id, state=self.serialize())
        self._observer.block_expression_generated(
            dataset=self._state.dataset, expression=self._expression.render()
        )
        return self._expression

    def serialize(self) -> dict[str, Any]:
        """Return the persisted payload: dataset, use_data_lake, add_labels, validate."""
        return self._state.model_dump(by_alias=True)

    def ui(self) -> list[InputSpec]:
        return build_inputs(state=self._state, choices=self._catalog.list_datasets())
