"""
Offset/limit windowing of a pagination decision.

Validates the page and page size of a decision and turns them into the row
range of the base query to fetch. Runs before any query is executed, so a
rejected request never reaches the database.
"""

from datapager.exceptions import InvalidParameterError
from datapager.schemas.pagination import PaginationDecision, Window


def clamp_items_per_page(decision: PaginationDecision) -> PaginationDecision:
    """
    Cap the page size at the configured maximum.

    Args:
        decision: Resolved pagination decision.

    Returns:
        The decision, with items_per_page lowered to maximum_items_per_page
        when it exceeds it.
    """
    maximum = decision.maximum_items_per_page
    if maximum is None or decision.items_per_page <= maximum:
        return decision
    return decision.model_copy(update={"items_per_page": maximum})


def window(decision: PaginationDecision) -> Window:
    """
    Compute the LIMIT/OFFSET window of a decision.

    Args:
        decision: Resolved (and clamped) pagination decision.

    Returns:
        The window; a page past the end simply yields no rows.

    Raises:
        InvalidParameterError: If items_per_page is negative, page is below
            1, or page is above 1 while items_per_page is 0.
    """
    if decision.items_per_page < 0:
        raise InvalidParameterError("Items per page must not be negative")

    if decision.page < 1:
        raise InvalidParameterError("Page must be at least 1")

    if decision.items_per_page == 0 and decision.page > 1:
        raise InvalidParameterError(
            "Page must be 1 when items per page is 0"
        )

    return Window(
        limit=decision.items_per_page,
        offset=(decision.page - 1) * decision.items_per_page,
    )
