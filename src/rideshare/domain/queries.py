"""
Relational queries across drivers, riders and trips.

Lookups never raise for a missing reference. A trip pointing at an unknown
driver or rider resolves to None and a warning is logged.
"""

from statistics import fmean

from rideshare.domain.entities import Driver, Rider, Trip
from rideshare.domain.registry import DriverRegistry, RiderRegistry, TripRegistry
from rideshare.utils.logging import get_logger

log = get_logger(__name__)


class RelationalQueries:
    """Read-only traversal over loaded registries."""

    def __init__(
        self,
        drivers: DriverRegistry,
        riders: RiderRegistry,
        trips: TripRegistry,
    ) -> None:
        """
        Initialize queries.

        Args:
            drivers: Loaded drivers.
            riders: Loaded riders.
            trips: Loaded trips.
        """
        self.drivers = drivers
        self.riders = riders
        self.trips = trips

    def find_trips_by_driver(self, driver_id: int) -> list[Trip]:
        """Trips driven by ``driver_id``, in load order. Empty if none."""
        return [trip for trip in self.trips if trip.driver_id == driver_id]

    def find_trips_by_rider(self, rider_id: int) -> list[Trip]:
        """Trips taken by ``rider_id``, in load order. Empty if none."""
        return [trip for trip in self.trips if trip.rider_id == rider_id]

    def resolve_driver(self, trip: Trip) -> Driver | None:
        """
        Driver of a trip.

        Returns:
            The matching Driver, or None (with a warning logged) when no
            driver has ``trip.driver_id``.
        """
        driver = self.drivers.find(trip.driver_id)
        if driver is None:
            log.warning(
                "Driver not found for trip",
                trip_id=trip.id,
                driver_id=trip.driver_id,
            )
        return driver

    def resolve_rider(self, trip: Trip) -> Rider | None:
        """
        Rider of a trip.

        Returns:
            The matching Rider, or None (with a warning logged) when no
            rider has ``trip.rider_id``.
        """
        rider = self.riders.find(trip.rider_id)
        if rider is None:
            log.warning(
                "Rider not found for trip",
                trip_id=trip.id,
                rider_id=trip.rider_id,
            )
        return rider

    def driver_average_rating(self, driver_id: int) -> float | None:
        """Mean rating over a driver's trips, or None without trips."""
        ratings = [trip.rating for trip in self.find_trips_by_driver(driver_id)]
        return fmean(ratings) if ratings else None

    def drivers_for_rider(self, rider_id: int) -> list[Driver]:
        """Distinct drivers a rider has travelled with, in first-trip order."""
        drivers: dict[int, Driver] = {}
        for trip in self.find_trips_by_rider(rider_id):
            if trip.driver_id in drivers:
                continue
            driver = self.resolve_driver(trip)
            if driver is not None:
                drivers[driver.id] = driver
        return list(drivers.values())

    def riders_for_driver(self, driver_id: int) -> list[Rider]:
        """Distinct riders a driver has carried, in first-trip order."""
        riders: dict[int, Rider] = {}
        for trip in self.find_trips_by_driver(driver_id):
            if trip.rider_id in riders:
                continue
            rider = self.resolve_rider(trip)
            if rider is not None:
                riders[rider.id] = rider
        return list(riders.values())
