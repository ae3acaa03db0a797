"""
Filter stage
Narrows a component sequence by exact type and brand match
"""

from typing import List, Sequence, Union

from pc_catalog_core.infra.catalog_source import ComponentRecord


def filter_components(
    components: Sequence[ComponentRecord],
    component_type: str = "",
    brand: str = "",
) -> Union[Sequence[ComponentRecord], List[ComponentRecord]]:
    """
    Keep records whose type and brand equal the given predicates.

    Matching is exact and case-sensitive. An empty predicate matches
    everything; with both empty the input is returned as-is. Order is
    preserved and zero matches yields an empty list.
    """
    if not component_type and not brand:
        return components

    return [
        comp for comp in components
        if (not component_type or comp.type == component_type)
        and (not brand or comp.brand == brand)
    ]
