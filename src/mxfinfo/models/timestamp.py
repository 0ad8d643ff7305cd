"""MXF timestamp model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Timestamp(BaseModel):
    """Calendar date-time as stored in header metadata.

    ``qmsec`` counts quarter-milliseconds in units of 4 ms (0-249), which
    is the sub-second resolution of the MXF timestamp type.
    """

    model_config = ConfigDict(frozen=True)

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    min: int = 0
    sec: int = 0
    qmsec: int = 0

    def to_datetime(self) -> datetime | None:
        """Convert to a naive datetime, or None if the date is unset/invalid."""
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.min,
                self.sec,
                self.qmsec * 4000,
            )
        except ValueError:
            return None

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.min:02d}:{self.sec:02d}.{self.qmsec * 4:03d}"
        )
