"""FastAPI app exposing the Record Service.

Orders and appointments posted here live only in this process.  Bodies
must be JSON objects with an ``id``; every other field is stored as-is.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from techstore.application.record_service import RecordService


# --- Pydantic Schemas ---


class RecordIn(BaseModel):
    """Any JSON object with an id key, whatever its type; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: Any


class RecordCreated(BaseModel):
    ok: bool = True
    id: Any


# --- FastAPI App ---


def create_app(service: RecordService | None = None) -> FastAPI:
    records = service if service is not None else RecordService()

    app = FastAPI(
        title="techstore record service",
        description="In-memory store for orders and service appointments",
        version="0.1.0",
    )
    app.state.records = records

    # Any origin may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/orders", response_model=RecordCreated)
    def create_order(record: RecordIn) -> RecordCreated:
        return RecordCreated(id=records.create_order(record.model_dump()))

    @app.post("/api/appointments", response_model=RecordCreated)
    def create_appointment(record: RecordIn) -> RecordCreated:
        return RecordCreated(id=records.create_appointment(record.model_dump()))

    @app.get("/api/orders")
    def list_orders() -> list[dict[str, Any]]:
        return records.list_orders()

    @app.get("/api/appointments")
    def list_appointments() -> list[dict[str, Any]]:
        return records.list_appointments()

    return app


app = create_app()
