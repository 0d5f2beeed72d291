"""Dataset id discovery from a loader namespace by naming convention."""

from collections.abc import Iterable

from tg_blockr.catalog.domain.catalog import DatasetId


def discover_dataset_ids(
    namespace: object,
    prefix: str,
    denylist: Iterable[str] = (),
) -> list[DatasetId]:
    """
    Return the dataset ids exposed by *namespace* as ``<prefix><dataset_id>`` callables.

    The prefix is stripped from each matching attribute name and denylisted
    helper names are dropped. The result is sorted and duplicate-free; a
    namespace without matching entries yields an empty list.
    """
    excluded = set(denylist)
    found: set[str] = set()
    for name in dir(namespace):
        if not name.startswith(prefix) or name == prefix:
            continue
        if not callable(getattr(namespace, name, None)):
            continue
        dataset_id = name[len(prefix) :]
        if dataset_id not in excluded:
            found.add(dataset_id)
    return sorted(found)
