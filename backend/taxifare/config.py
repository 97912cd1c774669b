"""Configuration for the taxi fare estimation system."""

from typing import Dict
import os
from dotenv import load_dotenv

from taxifare.models import GeoPoint, TariffMode, TariffTable

load_dotenv()


# The two tariffs in force; not configurable
TARIFF_TABLES: Dict[TariffMode, TariffTable] = {
    TariffMode.DAY: TariffTable(base_fare=60.0, per_km_rate=15.0),
    TariffMode.NIGHT: TariffTable(base_fare=80.0, per_km_rate=18.0),
}


class Settings:
    """Application settings."""

    # API Settings
    API_TITLE = "Taxi Fare Estimator"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = (
        "Straight-line taxi fare and driver ETA estimation with a persisted notes list"
    )

    # Database Settings
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taxifare.db")

    # CORS Settings
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:8081,http://127.0.0.1:8081,http://localhost:19006"
        ).split(",")
        if origin.strip()
    ]

    # Estimation defaults
    AVG_SPEED_KMH = float(os.getenv("AVG_SPEED_KMH", "40"))
    TAXI_STAND = GeoPoint(
        latitude=float(os.getenv("TAXI_STAND_LAT", "35.1735")),
        longitude=float(os.getenv("TAXI_STAND_LON", "33.3639")),
    )

    # Notes storage key
    NOTES_STORAGE_KEY = "MY_NOTES_V1"

    @classmethod
    def get_tariff(cls, mode: TariffMode) -> TariffTable:
        """Tariff table for a mode."""
        return TARIFF_TABLES[mode]

    @classmethod
    def get_tariff_tables(cls) -> Dict[TariffMode, TariffTable]:
        """Tariff tables for every mode."""
        return dict(TARIFF_TABLES)

    @classmethod
    def get_avg_speed_kmh(cls) -> float:
        """Average driver speed used when a request does not give one."""
        return cls.AVG_SPEED_KMH


settings = Settings()
