from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestParameters(BaseModel):
    """
    Client-supplied pagination values for a single request.

    Attributes:
        query: Flat query-string parameters.
        pagination_attributes: Optional pre-resolved pagination bag. When
            present, it is the only source consulted.
    """

    model_config = ConfigDict(frozen=True)

    query: dict[str, Any] = Field(default_factory=dict)
    pagination_attributes: dict[str, Any] | None = None

    def get(self, name: str, default: Any = None) -> Any:
        """
        Look up a client parameter.

        Args:
            name: Parameter name.
            default: Value returned when the parameter is absent.

        Returns:
            The raw client value, or default.
        """
        if self.pagination_attributes is not None:
            return self.pagination_attributes.get(name, default)
        return self.query.get(name, default)
