# reservation_engine/domain/intervals.py

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator


def intervals_overlap(
    start1: datetime,
    end1: datetime,
    start2: datetime,
    end2: datetime,
) -> bool:
    """
    Half-open comparison of [start1, end1) and [start2, end2).
    Ranges touching at an endpoint do not overlap.
    """
    return start1 < end2 and start2 < end1


class ReservedInterval(BaseModel):
    """A [start, end) range during which an item is held."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _check_order(self) -> "ReservedInterval":
        if self.start >= self.end:
            raise ValueError("Interval start must be before end")
        return self

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return intervals_overlap(self.start, self.end, start, end)

    def matches(self, start: datetime, end: datetime) -> bool:
        return self.start == start and self.end == end
