from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import Body, FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import StrictInt

from dispatch import CallStore, FloorCallStore, InvalidFloorError, TravelDirection

from .config import ServerSettings, configure_logging

logger = logging.getLogger(__name__)


def _bad_request(exc: InvalidFloorError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(exc))


def create_app(
    settings: Optional[ServerSettings] = None,
    store: Optional[CallStore] = None,
) -> FastAPI:
    """Build the API around a single call store shared by every request."""

    settings = settings or ServerSettings()
    store = store if store is not None else FloorCallStore()

    app = FastAPI(title=settings.title)
    app.state.settings = settings
    app.state.store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s responded %d in %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "pending": len(store)}

    @app.post(
        "/elevator-request",
        responses={400: {"description": "Floor number is not a positive integer"}},
    )
    async def request_elevator(floor_number: StrictInt = Body(...)) -> Response:
        """Request the elevator at a floor. Repeated requests are ignored."""
        try:
            store.add_call(floor_number)
        except InvalidFloorError as exc:
            raise _bad_request(exc)
        logger.debug("Call registered for floor %d", floor_number)
        return Response(status_code=200)

    @app.get(
        "/elevator-request",
        response_model=List[int],
        responses={204: {"description": "No pending calls"}},
    )
    async def outstanding_requests():
        """List pending floor calls in the order they were made."""
        calls = store.list_calls()
        if not calls:
            return Response(status_code=204)
        return calls

    @app.get(
        "/elevator-request/next",
        response_model=int,
        responses={
            204: {"description": "No pending call matches"},
            400: {"description": "Current floor is not a positive integer"},
        },
    )
    async def next_floor(
        current_floor: int = Query(..., alias="currentFloor"),
        direction: TravelDirection = Query(
            TravelDirection.STATIONARY, alias="elevatorTravelDirection"
        ),
    ):
        """Floor the elevator should stop at next given its position and direction."""
        try:
            floor = store.next_stop(current_floor, direction)
        except InvalidFloorError as exc:
            raise _bad_request(exc)
        if floor is None:
            return Response(status_code=204)
        return floor

    @app.delete(
        "/elevator-request/{floor_number}",
        responses={
            400: {"description": "Floor number is not a positive integer"},
            404: {"description": "No pending call for this floor"},
        },
    )
    async def delete_fulfilled_request(floor_number: int) -> Response:
        """Clear a call once the elevator has served it."""
        try:
            removed = store.remove_call(floor_number)
        except InvalidFloorError as exc:
            raise _bad_request(exc)
        if not removed:
            raise HTTPException(status_code=404, detail=f"No pending call for floor {floor_number}")
        logger.debug("Call for floor %d fulfilled", floor_number)
        return Response(status_code=200)

    return app


app = create_app(ServerSettings.from_env())


def main() -> None:
    import uvicorn

    settings: ServerSettings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%d", settings.title, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
