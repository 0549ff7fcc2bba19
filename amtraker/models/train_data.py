"""
Train data models and enums.

This module defines the data structures mirroring the Amtraker train
payloads: the train snapshot itself, its ordered station visits and the
response wrapper keyed by train number.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .keyed_map import (
    decode_keyed_map,
    parse_optional_timestamp,
    parse_timestamp,
    require,
    require_bool,
    require_float,
    require_int,
    require_list,
    require_str,
)


class TrainStatus(Enum):
    """Enumeration of the status of a train at one of its stations."""

    ENROUTE = "Enroute"
    STATION = "Station"
    DEPARTED = "Departed"
    UNKNOWN = "Unknown"


class TrainState(Enum):
    """Enumeration of the overall state of a train journey."""

    PREDEPARTURE = "Predeparture"
    ACTIVE = "Active"
    COMPLETE = "Complete"


@dataclass(frozen=True)
class TrainStation:
    """
    Represents a station visited by a train.

    Actual arrival and departure times are only present once the API
    knows them.
    """

    name: str
    code: str
    tz: str
    bus: bool
    schedule_arrival: datetime
    schedule_departure: datetime
    arrival: Optional[datetime]
    departure: Optional[datetime]
    arrival_comment: str
    departure_comment: str
    status: TrainStatus

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrainStation":
        """Build a station visit from its JSON object."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a station object, got {type(data).__name__}")

        return cls(
            name=require_str(data, "name"),
            code=require_str(data, "code"),
            tz=require_str(data, "tz"),
            bus=require_bool(data, "bus"),
            schedule_arrival=parse_timestamp(require(data, "schArr")),
            schedule_departure=parse_timestamp(require(data, "schDep")),
            arrival=parse_optional_timestamp(data.get("arr")),
            departure=parse_optional_timestamp(data.get("dep")),
            arrival_comment=require_str(data, "arrCmnt"),
            departure_comment=require_str(data, "depCmnt"),
            status=TrainStatus(require(data, "status")),
        )

    @property
    def has_arrived(self) -> bool:
        """Check if the train is at or has left this station."""
        return self.status in (TrainStatus.STATION, TrainStatus.DEPARTED)

    def minutes_until_arrival(self, now: Optional[datetime] = None) -> Optional[int]:
        """
        Get the signed number of minutes until the train reaches this station.

        Args:
            now: Reference time, naive values are taken as local time;
                defaults to the current time

        Returns:
            Optional[int]: Minutes until arrival, negative once passed, or
            None when no arrival time is known
        """
        if self.arrival is None:
            return None

        if now is None:
            now = datetime.now()
        if now.tzinfo is None:
            now = now.astimezone()
        # Truncated toward zero
        return int((self.arrival - now).total_seconds() / 60)


@dataclass(frozen=True)
class Train:
    """
    Immutable snapshot of a single tracked train.

    The stations are listed in the order the train visits them.
    """

    route_name: str
    train_num: int
    train_id: str
    lat: float
    lon: float
    train_timely: str
    stations: List[TrainStation]
    heading: str
    event_code: str
    event_tz: str
    event_name: str
    origin_code: str
    origin_tz: str
    origin_name: str
    destination_code: str
    destination_tz: str
    destination_name: str
    train_state: TrainState
    velocity: float
    status_message: str
    created_at: datetime
    updated_at: datetime
    last_value: datetime
    object_id: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Train":
        """Build a train from its JSON object."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a train object, got {type(data).__name__}")

        return cls(
            route_name=require_str(data, "routeName"),
            train_num=require_int(data, "trainNum"),
            train_id=require_str(data, "trainID"),
            lat=require_float(data, "lat"),
            lon=require_float(data, "lon"),
            train_timely=require_str(data, "trainTimely"),
            stations=[
                TrainStation.from_dict(station)
                for station in require_list(data, "stations")
            ],
            heading=require_str(data, "heading"),
            event_code=require_str(data, "eventCode"),
            event_tz=require_str(data, "eventTZ"),
            event_name=require_str(data, "eventName"),
            origin_code=require_str(data, "origCode"),
            origin_tz=require_str(data, "originTZ"),
            origin_name=require_str(data, "origName"),
            destination_code=require_str(data, "destCode"),
            destination_tz=require_str(data, "destTZ"),
            destination_name=require_str(data, "destName"),
            train_state=TrainState(require(data, "trainState")),
            velocity=require_float(data, "velocity"),
            status_message=require_str(data, "statusMsg"),
            created_at=parse_timestamp(require(data, "createdAt")),
            updated_at=parse_timestamp(require(data, "updatedAt")),
            last_value=parse_timestamp(require(data, "lastValTS")),
            object_id=require_int(data, "objectID"),
        )

    @property
    def is_active(self) -> bool:
        """Check if the train is currently running."""
        return self.train_state == TrainState.ACTIVE

    def find_station(self, code: str) -> Optional[TrainStation]:
        """Get the visit record for a station code, if the train calls there."""
        for station in self.stations:
            if station.code == code:
                return station
        return None

    def next_station(self) -> Optional[TrainStation]:
        """Get the first station the train is still en route to."""
        for station in self.stations:
            if station.status == TrainStatus.ENROUTE:
                return station
        return None

    def format_next_stop(self, now: Optional[datetime] = None) -> str:
        """Format where the train is heading for display."""
        upcoming = self.next_station()
        if upcoming is None:
            return f"{self.train_id} train is heading to {self.destination_code}"

        minutes = upcoming.minutes_until_arrival(now)
        eta = f"{minutes} minutes" if minutes is not None else "N/A"
        return (
            f"{self.train_id} train is heading to {self.destination_name}, "
            f"currently enroute to {upcoming.name} with an ETA of {eta}"
        )


@dataclass(frozen=True)
class TrainResponse(Mapping):
    """
    Trains returned by the API keyed by train number.

    A single train number can map to several trains running on
    different days.
    """

    trains: Dict[str, List[Train]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "TrainResponse":
        """Decode a `/trains` response body."""
        return cls(trains=decode_keyed_map(payload, _decode_train_list))

    def __getitem__(self, key: str) -> List[Train]:
        return self.trains[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.trains)

    def __len__(self) -> int:
        return len(self.trains)

    def all_trains(self) -> List[Train]:
        """Get every train in the response as a flat list."""
        return [train for trains in self.trains.values() for train in trains]

    def trains_on_route(self, route_name: str) -> List[Train]:
        """Get the trains running on a route."""
        return [train for train in self.all_trains() if train.route_name == route_name]


def _decode_train_list(value: Any) -> List[Train]:
    if not isinstance(value, list):
        raise TypeError(f"Expected an array of trains, got {type(value).__name__}")
    return [Train.from_dict(item) for item in value]
