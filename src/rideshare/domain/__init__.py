"""Domain entities, their registries and the queries that join them."""

from rideshare.domain.entities import Driver, Entity, Rider, Trip
from rideshare.domain.queries import RelationalQueries
from rideshare.domain.registry import (
    DriverRegistry,
    EntityRegistry,
    RiderRegistry,
    TripRegistry,
)

__all__ = [
    "Driver",
    "DriverRegistry",
    "Entity",
    "EntityRegistry",
    "RelationalQueries",
    "Rider",
    "RiderRegistry",
    "Trip",
    "TripRegistry",
]
