from pydantic import BaseModel, ConfigDict


class PaginationDecision(BaseModel):
    """
    Effective pagination settings of one request.

    Produced by the policy resolver from every configuration layer and the
    client parameters. Page values are validated when the decision is
    windowed, before any query runs.

    Attributes:
        enabled: Full pagination is enabled.
        partial: Partial pagination (no total count) is enabled.
        page: Requested page, 1-indexed.
        items_per_page: Page size, before clamping to the maximum.
        maximum_items_per_page: Upper bound for the page size, if any.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool
    partial: bool
    page: int = 1
    items_per_page: int
    maximum_items_per_page: int | None = None

    @property
    def should_paginate(self) -> bool:
        """Whether the request is paginated at all."""
        return self.enabled or self.partial


class Window(BaseModel):
    """Row range of the base query to fetch."""

    model_config = ConfigDict(frozen=True)

    limit: int
    offset: int
