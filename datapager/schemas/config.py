"""
Pagination configuration layers.

PaginationConfig holds the process-wide defaults. PaginationOverrides is a
single override layer where every field is optional (None means "not set
here"). ResourceOverrides groups the resource layer with its per-operation
layers, in precedence order.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from datapager.settings import Settings


class PaginationOverrides(BaseModel):
    """
    One layer of pagination overrides.

    Attributes:
        enabled: Whether full pagination is enabled.
        client_enabled: Whether the client may toggle pagination.
        items_per_page: Page size.
        client_items_per_page: Whether the client may choose the page size.
        maximum_items_per_page: Upper bound for the page size.
        partial: Whether partial pagination (no total count) is enabled.
        client_partial: Whether the client may toggle partial pagination.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool | None = None
    client_enabled: bool | None = None
    items_per_page: int | None = None
    client_items_per_page: bool | None = None
    maximum_items_per_page: int | None = None
    partial: bool | None = None
    client_partial: bool | None = None


class PaginationConfig(BaseModel):
    """
    Process-wide pagination defaults.

    Built once at startup (usually with from_settings) and passed into
    every paginated call. Immutable.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    client_enabled: bool = False
    items_per_page: int | None = 30
    client_items_per_page: bool = False
    maximum_items_per_page: int | None = None
    partial: bool = False
    client_partial: bool | None = None

    page_parameter_name: str = "page"
    items_per_page_parameter_name: str = "itemsPerPage"
    enabled_parameter_name: str = "pagination"
    partial_parameter_name: str = "partial"

    sql_dialect: str | None = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PaginationConfig":
        """
        Build the configuration from application settings.

        Args:
            settings: Loaded application settings.

        Returns:
            Immutable pagination configuration.
        """
        return cls(
            enabled=settings.PAGINATION_ENABLED,
            client_enabled=settings.PAGINATION_CLIENT_ENABLED,
            items_per_page=settings.PAGINATION_ITEMS_PER_PAGE,
            client_items_per_page=settings.PAGINATION_CLIENT_ITEMS_PER_PAGE,
            maximum_items_per_page=settings.PAGINATION_MAXIMUM_ITEMS_PER_PAGE,
            partial=settings.PAGINATION_PARTIAL,
            client_partial=settings.PAGINATION_CLIENT_PARTIAL,
            page_parameter_name=settings.PAGINATION_PAGE_PARAMETER_NAME,
            items_per_page_parameter_name=settings.PAGINATION_ITEMS_PER_PAGE_PARAMETER_NAME,
            enabled_parameter_name=settings.PAGINATION_ENABLED_PARAMETER_NAME,
            partial_parameter_name=settings.PAGINATION_PARTIAL_PARAMETER_NAME,
            sql_dialect=settings.PAGINATION_SQL_DIALECT,
        )


class ResourceOverrides(BaseModel):
    """
    Pagination overrides of a single resource.

    Attributes:
        resource: Overrides applying to every operation of the resource.
        operations: Overrides per operation name, applied after the
            resource layer.
    """

    model_config = ConfigDict(frozen=True)

    resource: PaginationOverrides = Field(default_factory=PaginationOverrides)
    operations: dict[str, PaginationOverrides] = Field(default_factory=dict)

    def layers(
        self, operation_name: str | None = None
    ) -> tuple[PaginationOverrides, ...]:
        """
        Return the override layers in precedence order (lowest first).

        Args:
            operation_name: Name of the operation being served, if any.

        Returns:
            The resource layer, followed by the operation layer when the
            operation has overrides.
        """
        operation = (
            self.operations.get(operation_name) if operation_name else None
        )
        if operation is None:
            return (self.resource,)
        return (self.resource, operation)
