"""
Catalog data sources
Read-only component records shared across requests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# Signed 16-bit ceiling for prices
MAX_PRICE = 32767


@dataclass(frozen=True)
class ComponentRecord:
    """A single PC hardware component."""
    type: str
    brand: str
    name: str
    image_url: str
    price: int

    def __post_init__(self):
        if not 0 <= self.price <= MAX_PRICE:
            raise ValueError(f"price out of range for {self.name!r}: {self.price}")


class CatalogSource(ABC):
    """Read-only source of component records.

    The pipeline only ever reads from a source, so an implementation
    backed by a database can replace the in-memory one without touching
    the filter/sort/paginate stages.
    """

    @abstractmethod
    def list_components(self) -> Tuple[ComponentRecord, ...]:
        """Return every record in catalog order"""

    def __len__(self) -> int:
        return len(self.list_components())


class InMemoryCatalogSource(CatalogSource):
    """Catalog held in memory, populated once and never mutated"""

    def __init__(self, components: Iterable[ComponentRecord]):
        self._components = tuple(components)

    def list_components(self) -> Tuple[ComponentRecord, ...]:
        return self._components


_REFERENCE_ROWS: List[Tuple[str, str, str, str, int]] = [
    ("CPU", "Intel", "Intel Core i9-10900K",
     "https://static.shop.kz/upload/resize_cache/iblock/481/450_450_1/154212x1.jpg", 500),
    ("GPU", "NVIDIA", "NVIDIA GeForce RTX 3080",
     "https://www.nvidia.com/content/dam/en-zz/Solutions/geforce/ampere/rtx-3080-3080ti/"
     "geforce-rtx-3080-ti-product-gallery-inline-850-2.jpg", 800),
    ("RAM", "Corsair", "Corsair Vengeance RGB Pro 16GB",
     "https://static.shop.kz/upload/resize_cache/iblock/75f/jnedijtsz335v3d1uo9uzx6605coss0l/"
     "450_450_1/171347o4.jpg", 150),
    ("Motherboard", "ASUS", "ASUS ROG Strix Z490-E Gaming",
     "https://static.shop.kz/upload/resize_cache/iblock/7fa/9ybjfv07nn75rg1o27ux9q7xdo0cw1yv/"
     "450_450_1/171994x1.jpg", 300),
    ("Storage", "Samsung", "Samsung 970 EVO Plus 1TB",
     "https://static.shop.kz/upload/resize_cache/iblock/113/450_450_1/155791_1.jpg", 200),
    ("Power Supply", "EVGA", "EVGA SuperNOVA 850 G5",
     "https://static.shop.kz/upload/resize_cache/iblock/68a/450_450_1/158510_01.jpg", 150),
    ("CPU", "AMD", "AMD Ryzen 9 5900X",
     "https://static.shop.kz/upload/resize_cache/iblock/a05/450_450_1/177555n1.jpg", 550),
    ("GPU", "AMD", "AMD Radeon RX 6800 XT",
     "https://static.shop.kz/upload/resize_cache/iblock/588/450_450_1/183588n1.jpg", 700),
    ("RAM", "G.Skill", "G.Skill Trident Z Neo 32GB",
     "https://static.shop.kz/upload/resize_cache/iblock/c3e/450_450_1/175271n1.jpg", 250),
    ("Motherboard", "MSI", "MSI MPG X570 Gaming Pro Carbon WiFi",
     "https://static.shop.kz/upload/resize_cache/iblock/ba3/450_450_1/177844x1.jpg", 280),
    ("Storage", "Western Digital", "WD Black SN750 NVMe SSD 1TB",
     "https://static.shop.kz/upload/resize_cache/iblock/79a/450_450_1/179287_1.jpg", 180),
    ("Power Supply", "Corsair", "Corsair RM850x 850W",
     "https://static.shop.kz/upload/resize_cache/iblock/a42/450_450_1/183238x1.jpg", 160),
]

_reference_catalog: Optional[InMemoryCatalogSource] = None


def get_reference_catalog() -> InMemoryCatalogSource:
    """Get the shared 12-record reference catalog (built on first use)"""
    global _reference_catalog
    if _reference_catalog is None:
        _reference_catalog = InMemoryCatalogSource(
            ComponentRecord(*row) for row in _REFERENCE_ROWS
        )
    return _reference_catalog
