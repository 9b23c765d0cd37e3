"""Schemas for simulated arrivals."""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")


class ArrivalOpen(CamelModel):
    """Service is running: the next simulated arrival."""
    headway_min: int
    next_arrival: str  # HH:MM, local time
    is_last: bool
    timezone: str


class ArrivalClosed(CamelModel):
    """Outside the service window."""
    service: Literal["closed"] = "closed"
    timezone: str


ArrivalResult = Union[ArrivalOpen, ArrivalClosed]


class NextMetro(CamelModel):
    station: str
    line: str
    headway_min: int
    next_arrival: str
    is_last: bool
    timezone: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "station": "Chatelet",
                "line": "M1",
                "headwayMin": 3,
                "nextArrival": "12:34",
                "isLast": False,
                "timezone": "Europe/Paris",
            }
        }
    )


class NextMetroClosed(CamelModel):
    station: str
    service: Literal["closed"] = "closed"
    timezone: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"station": "Chatelet", "service": "closed", "timezone": "Europe/Paris"}
        }
    )
