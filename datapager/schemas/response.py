import math
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

from datapager.constants import UNKNOWN_TOTAL_ITEMS

ItemType = TypeVar("ItemType")


class FullPage(BaseModel, Generic[ItemType]):  # type: ignore[misc]
    """
    Page of items together with the total item count.

    Attributes:
        items: Mapped items of the current page.
        page: Current page, 1-indexed.
        items_per_page: Effective page size.
        total_items: Number of items across all pages.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["full"] = "full"
    items: list[ItemType]
    page: Annotated[int, Field(ge=1)]
    items_per_page: Annotated[int, Field(ge=0)]
    total_items: Annotated[float, Field(ge=0)]

    @property
    def last_page(self) -> int:
        """Number of the last page (at least 1)."""
        if self.items_per_page <= 0:
            return 1
        return max(math.ceil(self.total_items / self.items_per_page), 1)


class PartialPage(BaseModel, Generic[ItemType]):  # type: ignore[misc]
    """
    Page of items without a total count.

    The total is never computed; total_items reports UNKNOWN_TOTAL_ITEMS.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["partial"] = "partial"
    items: list[ItemType]
    page: Annotated[int, Field(ge=1)]
    items_per_page: Annotated[int, Field(ge=0)]

    @property
    def total_items(self) -> float:
        """Reserved unknown total (UNKNOWN_TOTAL_ITEMS), never a real count."""
        return UNKNOWN_TOTAL_ITEMS

    @property
    def has_items(self) -> bool:
        """Whether the current page holds any item."""
        return bool(self.items)


PaginatedResult = Annotated[
    Union[FullPage[Any], PartialPage[Any]], Field(discriminator="kind")
]
