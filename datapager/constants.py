"""
Application-level constants for hardcoded pagination behavior.

These values represent core pagination behavior and should NEVER be changed
via environment variables or configuration. They define the shape of the
queries we generate and the sentinels callers rely on.

For configurable values (page sizes, parameter names, client overrides),
see datapager/settings.py where values can be overridden via environment
variables.
"""

# ============================================================================
# Count Query Rewriting
# ============================================================================

# Alias of the single aggregate column in generated count queries
# Lets the caller read the scalar regardless of the original column names
COUNT_ALIAS = "_count"

# Alias of the derived table used when the base query must be counted whole
# (DISTINCT projections, ORDER BY keys that cannot be grouped on)
COUNT_SUBQUERY_ALIAS = "_sub"


# ============================================================================
# Paginated Results
# ============================================================================

# Total item count reported by partial pagination (count never computed)
# Distinct from 0, which is a real count of an empty collection
UNKNOWN_TOTAL_ITEMS = -1.0

# Page size used when no layer configures one
# For the configurable default, see datapager/settings.py
# (PAGINATION_ITEMS_PER_PAGE)
DEFAULT_ITEMS_PER_PAGE = 30


# ============================================================================
# Request Scope
# ============================================================================

# ASGI scope key holding a pre-resolved pagination attribute bag
# When present, it shadows the query string entirely
PAGINATION_ATTRIBUTES_SCOPE_KEY = "pagination"
