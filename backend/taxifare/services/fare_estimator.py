"""Fare estimation service: straight-line distance, tariff fare and driver ETA."""

import math
from typing import Optional, Protocol, runtime_checkable
from abc import ABC, abstractmethod

from taxifare.models import GeoPoint, TariffMode, TariffTable, FareQuote
from taxifare.config import settings

EARTH_RADIUS_KM = 6371.0


@runtime_checkable
class FareEstimatorInterface(Protocol):
    """
    Interface for fare estimation.
    Every estimator is a pure computation: no I/O, no shared mutable state.
    """

    def distance_km(self, a: GeoPoint, b: GeoPoint) -> float:
        """Distance between two points in kilometres."""
        ...

    def quote(
        self,
        driver_origin: Optional[GeoPoint],
        passenger: Optional[GeoPoint],
        destination: Optional[GeoPoint],
        mode: TariffMode,
        avg_speed_kmh: float,
    ) -> FareQuote:
        """Fare, ride distance and driver ETA for a passenger."""
        ...


class BaseFareEstimator(ABC):
    """Abstract base class for fare estimators."""

    @abstractmethod
    def distance_km(self, a: GeoPoint, b: GeoPoint) -> float:
        """
        Distance between two points in kilometres.
        Must be implemented by subclasses.
        """
        pass

    def tariff(self, mode: TariffMode) -> TariffTable:
        """Tariff table selected by a mode."""
        return settings.get_tariff(mode)

    def quote(
        self,
        driver_origin: Optional[GeoPoint],
        passenger: Optional[GeoPoint],
        destination: Optional[GeoPoint],
        mode: TariffMode,
        avg_speed_kmh: float,
    ) -> FareQuote:
        """
        Build a fare quote.

        The driver leg runs from driver_origin to passenger, the ride leg from
        passenger to destination. Without a driver origin or passenger every
        figure is zero; without a destination only the ride figures are.

        Args:
            driver_origin: Where the driver starts (e.g. the taxi stand)
            passenger: Current passenger position
            destination: Destination chosen by the passenger, if any
            mode: Tariff mode selecting base fare and per-km rate
            avg_speed_kmh: Assumed average driver speed, must be positive

        Returns:
            FareQuote with distances in km, fare in currency units and ETA in minutes
        """
        if driver_origin is None or passenger is None:
            return FareQuote()

        driver_distance = self.distance_km(driver_origin, passenger)
        driver_eta = driver_distance / avg_speed_kmh * 60

        if destination is None:
            return FareQuote(
                driver_distance_km=driver_distance,
                driver_eta_minutes=driver_eta,
            )

        table = self.tariff(mode)
        ride_distance = self.distance_km(passenger, destination)

        return FareQuote(
            ride_distance_km=ride_distance,
            estimated_fare=table.base_fare + ride_distance * table.per_km_rate,
            driver_distance_km=driver_distance,
            driver_eta_minutes=driver_eta,
            has_destination=True,
        )


class HaversineFareEstimator(BaseFareEstimator):
    """Estimator using great-circle distance on a sphere of radius 6371 km."""

    def distance_km(self, a: GeoPoint, b: GeoPoint) -> float:
        d_lat = math.radians(b.latitude - a.latitude)
        d_lon = math.radians(b.longitude - a.longitude)

        h = (
            math.sin(d_lat / 2) ** 2
            + math.cos(math.radians(a.latitude))
            * math.cos(math.radians(b.latitude))
            * math.sin(d_lon / 2) ** 2
        )
        # rounding can push h just outside [0, 1] for antipodal or out-of-range points
        h = min(1.0, max(0.0, h))

        return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in kilometres between two points."""
    return get_fare_estimator().distance_km(a, b)


def quote(
    driver_origin: Optional[GeoPoint],
    passenger: Optional[GeoPoint],
    destination: Optional[GeoPoint],
    mode: TariffMode,
    avg_speed_kmh: float,
) -> FareQuote:
    """Fare quote using the fixed day and night tariffs."""
    return get_fare_estimator().quote(driver_origin, passenger, destination, mode, avg_speed_kmh)


# Singleton instance for default estimator
_default_estimator: Optional[FareEstimatorInterface] = None


def get_fare_estimator() -> FareEstimatorInterface:
    """
    Get the default fare estimator instance (Singleton pattern).

    Returns:
        Fare estimator instance implementing FareEstimatorInterface
    """
    global _default_estimator
    if _default_estimator is None:
        _default_estimator = HaversineFareEstimator()
    return _default_estimator
