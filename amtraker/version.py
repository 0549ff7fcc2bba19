"""
Version information for the Amtraker client library.

Centralized version management for the package, the HTTP User-Agent
and the upstream API location.
"""

# Core package information
__version__ = "1.0.0"
__app_name__ = "Amtraker"
__description__ = "Unofficial client for the Amtraker train and station tracking API"

# Upstream API information
__api_url__ = "https://api-v3.amtraker.com/v3"

__disclaimer__ = (
    "This library is not affiliated with Amtrak. Amtrak is a registered "
    "trademark of the National Railroad Passenger Corporation."
)


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_version_text() -> str:
    """Get the version string followed by the trademark disclaimer."""
    return f"{get_version_string()}\n{__disclaimer__}"


def get_user_agent() -> str:
    """Get the User-Agent header sent with every request."""
    return f"{__app_name__}/{__version__}"
