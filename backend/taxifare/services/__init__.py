"""Services package for the taxi fare estimation system."""

from .fare_estimator import (
    distance_km,
    quote,
    get_fare_estimator,
    FareEstimatorInterface,
    HaversineFareEstimator
)
from .notes import (
    get_notes_service,
    NotesService,
    NoteStore,
    NoteFormatError
)

__all__ = [
    'distance_km',
    'quote',
    'get_fare_estimator',
    'FareEstimatorInterface',
    'HaversineFareEstimator',
    'get_notes_service',
    'NotesService',
    'NoteStore',
    'NoteFormatError'
]
