"""
Amtraker client.

Query the Amtraker API for information about the trains and stations in
the Amtrak network.

This library is not affiliated with Amtrak in any way and is an unofficial
client of the public facing API.
"""

from .api import (
    AmtrakAPIException,
    AmtrakAPIFactory,
    AmtrakClient,
    AmtrakDataException,
    AmtrakNetworkException,
    AmtrakResponseException,
)
from .models import (
    Station,
    StationResponse,
    Train,
    TrainResponse,
    TrainStation,
    TrainState,
    TrainStatus,
)
from .version import __version__

__all__ = [
    "AmtrakAPIException",
    "AmtrakAPIFactory",
    "AmtrakClient",
    "AmtrakDataException",
    "AmtrakNetworkException",
    "AmtrakResponseException",
    "Station",
    "StationResponse",
    "Train",
    "TrainResponse",
    "TrainStation",
    "TrainState",
    "TrainStatus",
    "__version__",
]
