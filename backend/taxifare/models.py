"""Models for the taxi fare estimation system."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from enum import Enum


class GeoPoint(BaseModel):
    """
    Immutable geographic point in decimal degrees.

    Coordinates are not range-checked here; request models use GeoPointIn.
    """
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")


class GeoPointIn(GeoPoint):
    """GeoPoint received from a client, restricted to valid degree ranges."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class TariffMode(str, Enum):
    """Named fare-rate configuration."""
    DAY = "day"
    NIGHT = "night"


class TariffTable(BaseModel):
    """Base fare and per-kilometre rate for a tariff mode."""
    model_config = ConfigDict(frozen=True)

    base_fare: float = Field(..., ge=0, description="Flat fare charged per ride")
    per_km_rate: float = Field(..., ge=0, description="Fare per kilometre travelled")


class FareQuote(BaseModel):
    """Derived fare and ETA figures. Recomputed on every request, never stored."""
    ride_distance_km: float = Field(0.0, description="Passenger to destination distance")
    estimated_fare: float = Field(0.0, description="Tariff-based fare for the ride")
    driver_distance_km: float = Field(0.0, description="Driver origin to passenger distance")
    driver_eta_minutes: float = Field(0.0, description="Driver arrival estimate")
    has_destination: bool = Field(
        False,
        description="False when no destination was given and the ride fields are zero-filled"
    )


class DistanceRequest(BaseModel):
    """Request model for a point-to-point distance."""
    a: GeoPointIn
    b: GeoPointIn


class DistanceResponse(BaseModel):
    """Response model for a point-to-point distance."""
    distance_km: float


class QuoteRequest(BaseModel):
    """Request model for a fare quote."""
    passenger: Optional[GeoPointIn] = Field(
        None, description="Current passenger position; absent if location is unavailable"
    )
    destination: Optional[GeoPointIn] = Field(None, description="Destination picked on the map")
    driver_origin: Optional[GeoPointIn] = Field(
        None, description="Driver start point; defaults to the configured taxi stand"
    )
    mode: TariffMode = TariffMode.DAY
    avg_speed_kmh: Optional[float] = Field(
        None, gt=0, description="Assumed average driver speed; defaults to configuration"
    )


class Note(BaseModel):
    """A single persisted note."""
    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class NoteCreate(BaseModel):
    """Request model for creating a note."""
    text: str

    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        trimmed = v.strip()
        if not trimmed:
            raise ValueError("Note text must not be blank")
        return trimmed


class NoteList(BaseModel):
    """Response model listing notes in creation order."""
    notes: List[Note]
    count: int
