from typing import Optional, Tuple

from db.models import CatalogItem

CATEGORIES: Tuple[str, ...] = ("electronics", "clothing", "cosmetics")
FILTER_CATEGORIES: Tuple[str, ...] = ("all", *CATEGORIES)

PRODUCTS: Tuple[CatalogItem, ...] = (
    CatalogItem(name="Phone", price=799, category="electronics"),
    CatalogItem(name="Headphones", price=199, category="electronics"),
    CatalogItem(name="T-Shirt", price=20, category="clothing"),
    CatalogItem(name="Jeans", price=30, category="clothing"),
    CatalogItem(name="sunscreen", price=15, category="cosmetics"),
    CatalogItem(name="moisturizer", price=10, category="cosmetics"),
)


def find_item(name: str) -> Optional[CatalogItem]:
    """Return the catalog item with the given name, or None."""
    for item in PRODUCTS:
        if item.name == name:
            return item
    return None
