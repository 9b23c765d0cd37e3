import logging
from datetime import datetime
from typing import Union

from fastapi import APIRouter, Depends, Query

from app.config.profile import ServiceProfile
from app.core.dependencies import get_now, get_profile
from app.core.errors import MissingParameter
from app.core.logging_config import APP_LOGGER
from app.schemas.arrival import ArrivalClosed, NextMetro, NextMetroClosed
from app.schemas.response import ErrorMessage
from app.services.arrival_service import compute_next_arrival

router = APIRouter(prefix="", tags=["metro"])
logger = logging.getLogger(APP_LOGGER)


@router.get(
    "/next-metro",
    summary="Next simulated arrival at a station",
    response_model=Union[NextMetro, NextMetroClosed],
    description=(
        "Simulates the next train of the line at the given station.\n\n"
        "Parameters:\n- `station` (string, required): station name, e.g. `Chatelet`.\n\n"
        "Response:\n"
        "- during service (05:30 to 01:15): `station`, `line`, `headwayMin`, `nextArrival` (HH:MM), "
        "`isLast` (true from 00:45) and `timezone`\n"
        "- outside service: `station`, `service: \"closed\"` and `timezone`\n\n"
        "Example:\n``GET /next-metro?station=Chatelet``"
    ),
    responses={400: {"model": ErrorMessage, "description": "Missing parameter"}},
)
@router.head("/next-metro", include_in_schema=False)
def next_metro(
    station: str = Query(..., description="Station name", examples=["Chatelet"]),
    now: datetime = Depends(get_now),
    profile: ServiceProfile = Depends(get_profile),
):
    # absent is answered by the validation handler, empty lands here
    if not station:
        raise MissingParameter("station")

    result = compute_next_arrival(now, profile.headway_min, profile)
    if isinstance(result, ArrivalClosed):
        logger.debug(f"{station}: service closed")
        return NextMetroClosed(station=station, timezone=result.timezone)

    return NextMetro(
        station=station,
        line=profile.line,
        headway_min=result.headway_min,
        next_arrival=result.next_arrival,
        is_last=result.is_last,
        timezone=result.timezone,
    )
