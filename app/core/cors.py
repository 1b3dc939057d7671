"""CORS headers attached to every translate API response."""


def get_cors_headers() -> dict[str, str]:
    """Return a fresh copy of the fixed CORS header set."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
        "Access-Control-Max-Age": "86400",
    }


def get_json_headers() -> dict[str, str]:
    """CORS headers merged with the JSON content type."""
    return {**get_cors_headers(), "Content-Type": "application/json"}
