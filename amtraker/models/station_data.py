"""
Station data models.

This module defines the station snapshot and the response wrapper keyed
by station code.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from .keyed_map import decode_keyed_map, require_float, require_list, require_str


@dataclass(frozen=True)
class Station:
    """Immutable snapshot of a station in the network."""

    name: str
    code: str
    tz: str
    lat: float
    lon: float
    address1: str
    address2: str
    city: str
    state: str
    zip: str
    trains: List[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Station":
        """Build a station from its JSON object."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a station object, got {type(data).__name__}")

        trains = require_list(data, "trains")
        for train_id in trains:
            if not isinstance(train_id, str):
                raise TypeError(f"Train identifiers must be strings, got {train_id!r}")

        return cls(
            name=require_str(data, "name"),
            code=require_str(data, "code"),
            tz=require_str(data, "tz"),
            lat=require_float(data, "lat"),
            lon=require_float(data, "lon"),
            address1=require_str(data, "address1"),
            address2=require_str(data, "address2"),
            city=require_str(data, "city"),
            state=require_str(data, "state"),
            zip=require_str(data, "zip"),
            trains=list(trains),
        )

    @property
    def coordinates(self) -> Tuple[float, float]:
        """Get station coordinates as (lat, lon)."""
        return (self.lat, self.lon)

    def format_address(self) -> str:
        """Format the postal address on one line."""
        street = ", ".join(
            part.strip() for part in (self.address1, self.address2) if part.strip()
        )
        return f"{street}, {self.city}, {self.state} {self.zip}".lstrip(", ")

    def format_trains(self) -> str:
        """Format the associated train identifiers."""
        if not self.trains:
            return "No trains"
        return ", ".join(self.trains)


@dataclass(frozen=True)
class StationResponse(Mapping):
    """Stations returned by the API keyed by station code."""

    stations: Dict[str, Station] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "StationResponse":
        """Decode a `/stations` response body."""
        return cls(stations=decode_keyed_map(payload, Station.from_dict))

    def __getitem__(self, key: str) -> Station:
        return self.stations[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.stations)

    def __len__(self) -> int:
        return len(self.stations)

    def stations_in_state(self, state: str) -> List[Station]:
        """Get the stations located in a state, by its postal code."""
        return [station for station in self.stations.values() if station.state == state]
