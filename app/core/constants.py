"""Core constants: cache domain labels and shared literal values.

Single source of truth for cache key structure. Used by the cache config,
key builders and cached repository decorators.
"""

# Cache domain labels (one namespace per cached repository)
CACHE_DOMAIN_BRAND = "brand"
CACHE_DOMAIN_COLOR = "color"
CACHE_DOMAIN_MODEL = "model"
CACHE_DOMAIN_CITY = "city"
CACHE_DOMAIN_CAR = "car"
CACHE_DOMAIN_DRIVER = "driver"
CACHE_DOMAIN_USER = "user"
CACHE_DOMAIN_AUTH = "auth"
CACHE_DOMAIN_TRIP = "trip"
CACHE_DOMAIN_TRAVEL = "travel"
CACHE_DOMAIN_INSCRIPTION = "inscription"

CACHE_DOMAINS: tuple[str, ...] = (
    CACHE_DOMAIN_BRAND,
    CACHE_DOMAIN_COLOR,
    CACHE_DOMAIN_MODEL,
    CACHE_DOMAIN_CITY,
    CACHE_DOMAIN_CAR,
    CACHE_DOMAIN_DRIVER,
    CACHE_DOMAIN_USER,
    CACHE_DOMAIN_AUTH,
    CACHE_DOMAIN_TRIP,
    CACHE_DOMAIN_TRAVEL,
    CACHE_DOMAIN_INSCRIPTION,
)

# Delimiter for key segments and composite arguments
CACHE_KEY_SEP = ":"

# Marker field of the cache entry wrapper {"__cached": True, "data": ...}
CACHE_WRAPPER_FLAG = "__cached"
CACHE_WRAPPER_DATA = "data"

# Pagination bounds
PAGINATION_DEFAULT_PAGE = 1
PAGINATION_DEFAULT_LIMIT = 20
PAGINATION_MAX_LIMIT = 100
