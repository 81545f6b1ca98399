"""Default parameter values for the Geo Project Dashboard.

These constants are used as `Field(default=...)` values in the Pydantic
schemas and by the mock data generator. They live in the schemas layer so
that `schemas` does not depend on `core` or `services`.
"""

# =============================================================================
# QUERY DEFAULTS
# =============================================================================
DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE_OPTIONS = (25, 50, 100)
DEFAULT_SORT_FIELD = "project_name"
DEFAULT_SORT_DIRECTION = "asc"

# Sentinel for "no status filtering"
STATUS_ALL = "All"

# =============================================================================
# TIMING
# =============================================================================
# Debounce window between the last parameter change and the reload.
DEFAULT_DEBOUNCE_MS = 300
# Simulated network latency of the mock API.
DEFAULT_API_LATENCY_MS = 300
DEFAULT_LOOKUP_LATENCY_MS = 100

# =============================================================================
# MOCK DATA
# =============================================================================
DEFAULT_RECORD_COUNT = 5000
DEFAULT_FAILURE_RATE = 0.0
# Last-updated timestamps are spread over this many days before "today".
LAST_UPDATED_WINDOW_DAYS = 90

BUDGET_MIN = 100_000
BUDGET_SPAN = 5_000_000

# (region, city, (lat_min, lat_max), (lon_min, lon_max))
MOCK_REGIONS = (
    ("North", "Delhi", (28.4, 28.8), (77.0, 77.4)),
    ("North", "Punjab", (31.0, 32.0), (74.5, 76.5)),
    ("South", "Bangalore", (12.8, 13.2), (77.5, 77.9)),
    ("South", "Chennai", (12.8, 13.2), (80.1, 80.5)),
    ("South", "Hyderabad", (17.3, 17.5), (78.4, 78.6)),
    ("East", "Kolkata", (22.5, 22.6), (88.3, 88.5)),
    ("East", "Patna", (25.5, 25.7), (85.1, 85.3)),
    ("West", "Mumbai", (19.0, 19.3), (72.8, 73.0)),
    ("West", "Pune", (18.5, 18.6), (73.8, 73.9)),
    ("West", "Ahmedabad", (23.0, 23.2), (72.5, 72.7)),
    ("Central", "Indore", (22.7, 22.8), (75.8, 75.9)),
    ("Central", "Nagpur", (21.1, 21.2), (79.0, 79.2)),
)

MOCK_INDUSTRIES = (
    "IT & Software",
    "Manufacturing",
    "Healthcare",
    "Renewable Energy",
    "Transportation",
    "Agriculture",
    "Real Estate",
    "Retail",
    "Finance",
    "Education",
)

# =============================================================================
# MAP
# =============================================================================
# Initial view before any records are loaded (center of India).
DEFAULT_MAP_CENTER = (20.5937, 78.9629)
DEFAULT_MAP_ZOOM = 5.0
MAX_FIT_ZOOM = 15.0
