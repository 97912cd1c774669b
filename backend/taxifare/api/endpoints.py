"""API endpoints for fare estimation and notes."""

from fastapi import APIRouter, HTTPException, Depends

from taxifare.models import (
    DistanceRequest,
    DistanceResponse,
    QuoteRequest,
    FareQuote,
    Note,
    NoteCreate,
    NoteList,
)
from taxifare.services import get_fare_estimator
from taxifare.services.fare_estimator import FareEstimatorInterface
from taxifare.services.notes import NotesService, get_notes_service
from taxifare.config import settings
from taxifare.database import get_db_manager

router = APIRouter(prefix="/api", tags=["Fare Estimation"])


def get_estimator() -> FareEstimatorInterface:
    """
    Dependency injection for fare estimator.
    Returns any implementation of FareEstimatorInterface.
    """
    return get_fare_estimator()


def get_notes() -> NotesService:
    """Dependency injection for the notes service."""
    return get_notes_service()


@router.post("/distance", response_model=DistanceResponse)
async def calculate_distance(
    request: DistanceRequest,
    estimator: FareEstimatorInterface = Depends(get_estimator)
) -> DistanceResponse:
    """Straight-line distance in kilometres between two points."""
    return DistanceResponse(distance_km=estimator.distance_km(request.a, request.b))


@router.post("/quote", response_model=FareQuote)
async def calculate_quote(
    request: QuoteRequest,
    estimator: FareEstimatorInterface = Depends(get_estimator)
) -> FareQuote:
    """
    Quote a ride from the passenger position to an optional destination.

    Args:
        request: Passenger, destination, driver origin, tariff mode and speed
        estimator: Injected estimator implementing FareEstimatorInterface

    Returns:
        FareQuote, zero-filled where an input point is absent

    Raises:
        HTTPException: If the estimate cannot be produced
    """
    driver_origin = request.driver_origin or settings.TAXI_STAND
    avg_speed_kmh = request.avg_speed_kmh or settings.get_avg_speed_kmh()

    try:
        return estimator.quote(
            driver_origin,
            request.passenger,
            request.destination,
            request.mode,
            avg_speed_kmh,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@router.get("/tariffs")
async def get_tariffs():
    """
    Get the fixed tariff tables and estimation defaults.

    Returns:
        Tariffs per mode plus the estimation defaults
    """
    tables = settings.get_tariff_tables()

    return {
        "tariffs": [
            {
                "mode": mode.value,
                "base_fare": table.base_fare,
                "per_km_rate": table.per_km_rate,
                "description": f"{mode.value.capitalize()} tariff",
            }
            for mode, table in tables.items()
        ],
        "avg_speed_kmh": settings.get_avg_speed_kmh(),
        "taxi_stand": settings.TAXI_STAND.model_dump(),
    }


@router.get("/notes", response_model=NoteList)
async def list_notes(notes: NotesService = Depends(get_notes)) -> NoteList:
    """List notes in creation order."""
    current = notes.notes
    return NoteList(notes=current, count=len(current))


@router.post("/notes", response_model=Note, status_code=201)
async def create_note(
    request: NoteCreate,
    notes: NotesService = Depends(get_notes)
) -> Note:
    """Create a note from non-blank text."""
    note = notes.add_note(request.text)
    if note is None:
        raise HTTPException(status_code=400, detail="Note text must not be blank")
    return note


@router.delete("/notes/{note_id}")
async def delete_note(note_id: str, notes: NotesService = Depends(get_notes)):
    """Delete a note by id."""
    if not notes.delete_note(note_id):
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")
    return {"id": note_id, "message": "Note deleted"}


@router.get("/health")
async def health_check():
    """Health check endpoint including database status."""
    db_status = "healthy"
    try:
        notes_stored = get_db_manager().get_item(settings.NOTES_STORAGE_KEY) is not None
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"
        notes_stored = False

    return {
        "status": "healthy",
        "service": "Taxi Fare Estimator",
        "datastore_status": db_status,
        "tariff_modes": [mode.value for mode in settings.get_tariff_tables()],
        "notes_stored": notes_stored
    }
