"""
Sort stage
Ascending, stable ordering by a named field
"""

from typing import Callable, Dict, List, Sequence, Union

from pc_catalog_core.infra.catalog_source import ComponentRecord

SORT_KEYS: Dict[str, Callable[[ComponentRecord], object]] = {
    "name": lambda comp: comp.name,
    "price": lambda comp: comp.price,
}


def sort_components(
    components: Sequence[ComponentRecord],
    sort_by: str = "",
) -> Union[Sequence[ComponentRecord], List[ComponentRecord]]:
    """Order components by ``sort_by``; unknown keys leave the order unchanged."""
    key = SORT_KEYS.get(sort_by)
    if key is None:
        return components

    # sorted() is stable, equal keys keep their relative order
    return sorted(components, key=key)
