"""UI surface of the TG Data block — one select input and three checkboxes."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from tg_blockr.block.domain.state import BlockState

DATA_LAKE_LABEL = "Use data lake (faster, requires GITEA_TOK)"
ADD_LABELS_LABEL = "Add labels (bfsnr_name, kategorie_name)"
VALIDATE_LABEL = "Validate data"


class SelectInput(BaseModel, frozen=True):
    widget: Literal["select"] = "select"
    input_id: str = Field(min_length=1)
    label: str
    choices: list[str]
    selected: str = ""


class CheckboxInput(BaseModel, frozen=True):
    widget: Literal["checkbox"] = "checkbox"
    input_id: str = Field(min_length=1)
    label: str
    value: bool


type InputSpec = Annotated[SelectInput | CheckboxInput, Field(discriminator="widget")]


def build_inputs(state: BlockState, choices: list[str]) -> list[InputSpec]:
    """Describe the block's inputs, pre-filled from *state*, for the host UI shell."""
    return [
        SelectInput(
            input_id="dataset",
            label="Dataset",
            choices=choices,
            selected=state.dataset,
        ),
        CheckboxInput(
            input_id="use_data_lake", label=DATA_LAKE_LABEL, value=state.use_data_lake
        ),
        CheckboxInput(
            input_id="add_labels", label=ADD_LABELS_LABEL, value=state.add_labels
        ),
        CheckboxInput(
            input_id="validate", label=VALIDATE_LABEL, value=state.validate_data
        ),
    ]
