"""FastAPI application."""

from fastapi import FastAPI

from backend.daytrip.api.routes.chat import router as chat_router
from backend.daytrip.api.routes.health import router as health_router
from backend.daytrip.api.routes.metrics import router as metrics_router

app = FastAPI(title="Day Trip Planner API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(chat_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Day Trip Planner API", "version": "0.1.0"}
