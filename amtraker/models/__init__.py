"""
Data models for the Amtraker client.

This module contains the immutable structures mirroring the API payloads
for trains and stations, and the response wrappers keyed by identifier.
"""

from .keyed_map import decode_keyed_map
from .station_data import Station, StationResponse
from .train_data import Train, TrainResponse, TrainStation, TrainState, TrainStatus

__all__ = [
    "decode_keyed_map",
    "Station",
    "StationResponse",
    "Train",
    "TrainResponse",
    "TrainStation",
    "TrainState",
    "TrainStatus",
]
