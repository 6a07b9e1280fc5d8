# provide dataclass models

from dataclasses import dataclass
from typing import Literal, Tuple, Union

Category = Literal["electronics", "clothing", "cosmetics"]
FilterCategory = Literal["all", "electronics", "clothing", "cosmetics"]


@dataclass(frozen=True)
class CatalogItem:
    name: str
    price: Union[int, float]
    category: Category


@dataclass(frozen=True)
class CartLine:
    name: str  # references CatalogItem.name
    price: Union[int, float]  # unit price when first added
    quantity: int


# ordered, unique by CartLine.name
Cart = Tuple[CartLine, ...]


@dataclass(frozen=True)
class Session:
    username: str = ""
    logged_in: bool = False


@dataclass(frozen=True)
class FilterState:
    search_term: str = ""
    category: FilterCategory = "all"
