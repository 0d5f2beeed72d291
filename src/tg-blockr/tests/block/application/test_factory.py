"""Tests for new_tgdata_block — the constructor registered with the host."""

from tg_blockr.block.application.block import TgDataBlock
from tg_blockr.block.application.factory import new_tgdata_block
from tg_blockr.block.domain.expression import CallExpression, EmptyFrameExpression
from tg_blockr.config.domain.loaders import LoaderConfig
from tests.block.fake_observer import FakeBlockObserver
from tests.block.fake_resolver import FakeLoaderResolver
from tests.catalog.fake_catalog import FakeDatasetCatalog

_FAKE_LOADERS = LoaderConfig(
    fetch_function="tests.fake_loaders.tg_data.get_dataset",
    cache_function="tests.fake_loaders.tg_plot.get_data",
    fetch_namespace="tests.fake_loaders.tg_data",
)


class TestNewTgdataBlock:
    """Defaults select no dataset and enable every checkbox."""

    def test_returns_tg_data_block(self) -> None:
        block = new_tgdata_block(observer=FakeBlockObserver())

        assert isinstance(block, TgDataBlock)
        assert block.block_class == "tgdata_block"

    def test_default_block_has_no_dataset(self) -> None:
        block = new_tgdata_block(observer=FakeBlockObserver())

        assert block.expression == EmptyFrameExpression()

    def test_default_loaders_are_tg_libraries(self) -> None:
        block = new_tgdata_block("energie_emiss_co2", observer=FakeBlockObserver())

        assert block.expression == CallExpression(
            function="tg_plot.get_data", args=("energie_emiss_co2",)
        )

    def test_direct_fetch_arguments(self) -> None:
        block = new_tgdata_block(
            "energie_emiss_co2",
            use_data_lake=False,
            add_labels=True,
            validate=False,
            observer=FakeBlockObserver(),
        )

        assert block.expression == CallExpression(
            function="tg_data.get_dataset",
            args=("energie_emiss_co2",),
            kwargs={"add_labels": True, "validate": False},
        )

    def test_discovers_catalog_from_configured_namespace(self) -> None:
        block = new_tgdata_block(loaders=_FAKE_LOADERS, observer=FakeBlockObserver())

        select = block.ui()[0]
        assert select.input_id == "dataset"
        assert select.choices == [  # type: ignore[union-attr]
            "abfall_menge_art",
            "energie_emiss_co2",
            "heizsysteme",
        ]

    def test_configured_loaders_are_used(self) -> None:
        block = new_tgdata_block(
            "heizsysteme", loaders=_FAKE_LOADERS, observer=FakeBlockObserver()
        )

        assert block.expression == CallExpression(
            function="tests.fake_loaders.tg_plot.get_data", args=("heizsysteme",)
        )

    def test_explicit_collaborators_take_precedence(self) -> None:
        catalog = FakeDatasetCatalog(["only_one"])
        block = new_tgdata_block(
            "only_one",
            catalog=catalog,
            resolver=FakeLoaderResolver(),
            observer=FakeBlockObserver(),
        )

        assert block.ui()[0].choices == ["only_one"]  # type: ignore[union-attr]

    def test_missing_fetch_library_gives_empty_choices(self) -> None:
        block = new_tgdata_block(
            loaders=LoaderConfig(fetch_namespace="no_such_tg_data_module"),
            observer=FakeBlockObserver(),
        )

        assert block.ui()[0].choices == []  # type: ignore[union-attr]

    def test_fetch_library_failing_at_import_gives_empty_choices(self) -> None:
        block = new_tgdata_block(
            loaders=LoaderConfig(fetch_namespace="tests.fake_loaders.raising_namespace"),
            observer=FakeBlockObserver(),
        )

        assert block.ui()[0].choices == []  # type: ignore[union-attr]
