from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Pagination defaults
    PAGINATION_ENABLED: bool = True
    PAGINATION_ITEMS_PER_PAGE: int | None = 30
    PAGINATION_MAXIMUM_ITEMS_PER_PAGE: int | None = None
    PAGINATION_PARTIAL: bool = False

    # Which settings the client may override through query parameters
    PAGINATION_CLIENT_ENABLED: bool = False
    PAGINATION_CLIENT_ITEMS_PER_PAGE: bool = False
    PAGINATION_CLIENT_PARTIAL: bool | None = None

    # Query parameter names
    PAGINATION_PAGE_PARAMETER_NAME: str = "page"
    PAGINATION_ITEMS_PER_PAGE_PARAMETER_NAME: str = "itemsPerPage"
    PAGINATION_ENABLED_PARAMETER_NAME: str = "pagination"
    PAGINATION_PARTIAL_PARAMETER_NAME: str = "partial"

    # sqlglot dialect used to parse and rebuild count queries (None = generic)
    PAGINATION_SQL_DIALECT: str | None = None


app_settings = Settings()
