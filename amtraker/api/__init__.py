"""
API integration for the Amtraker client.

This module handles communication with the Amtraker API, including
error handling and response decoding.
"""

from .amtrak_api_manager import (
    AioHttpClient,
    AmtrakAPIException,
    AmtrakAPIFactory,
    AmtrakAPIResponse,
    AmtrakClient,
    AmtrakDataException,
    AmtrakNetworkException,
    AmtrakResponseException,
    HTTPClient,
)

__all__ = [
    "AioHttpClient",
    "AmtrakAPIException",
    "AmtrakAPIFactory",
    "AmtrakAPIResponse",
    "AmtrakClient",
    "AmtrakDataException",
    "AmtrakNetworkException",
    "AmtrakResponseException",
    "HTTPClient",
]
