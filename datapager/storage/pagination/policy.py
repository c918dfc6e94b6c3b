"""
Pagination policy resolution.

Merges the global defaults, the resource layer, the operation layer and,
where a layer allows it, the client's request parameters into a single
PaginationDecision. Resolution is a pure fold: each layer may set a field,
the last layer that sets it wins.
"""

from typing import Any, Iterable

from pydantic import TypeAdapter, ValidationError

from datapager.constants import DEFAULT_ITEMS_PER_PAGE
from datapager.context import get_request_parameters
from datapager.schemas.config import (
    PaginationConfig,
    PaginationOverrides,
    ResourceOverrides,
)
from datapager.schemas.pagination import PaginationDecision
from datapager.schemas.request import RequestParameters

_bool_adapter = TypeAdapter(bool)
_int_adapter = TypeAdapter(int)

_MISSING = object()


def coerce_bool(value: Any, default: bool) -> bool:
    """
    Interpret a client-supplied boolean-like value.

    "1", "true", "yes", "on" (any case) and 1 are true; "0", "false", "no",
    "off", "" and 0 are false. Anything else yields the default.

    Args:
        value: Raw client value.
        default: Value used when the input is not boolean-like.

    Returns:
        The parsed flag.
    """
    if isinstance(value, str) and not value.strip():
        return False
    try:
        return _bool_adapter.validate_python(value)
    except ValidationError:
        return default


def coerce_int(value: Any, default: int) -> int:
    """
    Interpret a client-supplied integer, falling back to default.

    Args:
        value: Raw client value.
        default: Value used when the input is not an integer.

    Returns:
        The parsed integer.
    """
    if isinstance(value, bool):
        return default
    try:
        return _int_adapter.validate_python(value)
    except ValidationError:
        return default


def merge_layers(
    config: PaginationConfig, layers: Iterable[PaginationOverrides]
) -> dict[str, Any]:
    """
    Fold override layers over the global defaults.

    Args:
        config: Global defaults.
        layers: Override layers, lowest precedence first.

    Returns:
        Effective value of every overridable field.
    """
    merged = {
        name: getattr(config, name)
        for name in PaginationOverrides.model_fields
    }
    for layer in layers:
        for name in PaginationOverrides.model_fields:
            value = getattr(layer, name)
            if value is not None:
                merged[name] = value
    return merged


def _client_value(params: RequestParameters, name: str) -> Any:
    return params.get(name, _MISSING)


def resolve(
    config: PaginationConfig,
    overrides: ResourceOverrides | None,
    params: RequestParameters,
    operation_name: str | None = None,
) -> PaginationDecision:
    """
    Resolve the pagination decision of a request.

    Args:
        config: Global pagination defaults.
        overrides: Overrides of the paginated resource, if any.
        params: Client parameters of the request.
        operation_name: Operation being served; selects the operation layer.

    Returns:
        The effective decision. Page values are not validated here.
    """
    layers = overrides.layers(operation_name) if overrides else ()
    merged = merge_layers(config, layers)

    enabled = merged["enabled"]
    if merged["client_enabled"]:
        raw = _client_value(params, config.enabled_parameter_name)
        if raw is not _MISSING:
            enabled = coerce_bool(raw, enabled)

    partial = merged["partial"]
    if merged["client_partial"]:
        raw = _client_value(params, config.partial_parameter_name)
        if raw is not _MISSING:
            partial = coerce_bool(raw, partial)

    items_per_page = merged["items_per_page"]
    if items_per_page is None:
        items_per_page = DEFAULT_ITEMS_PER_PAGE
    if merged["client_items_per_page"]:
        raw = _client_value(params, config.items_per_page_parameter_name)
        if raw is not _MISSING:
            items_per_page = coerce_int(raw, items_per_page)

    page = coerce_int(
        params.get(config.page_parameter_name, 1), default=1
    )

    return PaginationDecision(
        enabled=enabled,
        partial=partial,
        page=page,
        items_per_page=items_per_page,
        maximum_items_per_page=merged["maximum_items_per_page"],
    )


def should_paginate(
    config: PaginationConfig,
    overrides: ResourceOverrides | None = None,
    params: RequestParameters | None = None,
    operation_name: str | None = None,
) -> bool:
    """
    Check whether a collection request should be paginated.

    Args:
        config: Global pagination defaults.
        overrides: Overrides of the paginated resource, if any.
        params: Client parameters. Defaults to the current request scope.
        operation_name: Operation being served.

    Returns:
        True when full or partial pagination is enabled. Always False
        outside of a request scope.
    """
    if params is None:
        params = get_request_parameters()
    if params is None:
        return False
    return resolve(config, overrides, params, operation_name).should_paginate
