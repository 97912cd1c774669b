"""FastAPI application for the taxi fare estimation system."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taxifare.api.endpoints import router
from taxifare.config import settings

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "message": "Taxi Fare Estimator API",
        "version": settings.API_VERSION,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("taxifare.main:app", host="0.0.0.0", port=8000, reload=True)
