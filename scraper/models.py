from dataclasses import asdict, dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Event:
    """One seismic event as published in the bulletin."""

    # Date as printed in the bulletin, never reformatted
    date: str
    # Unix epoch seconds, sub-second part truncated
    time: int
    depth_km: float
    magnitude: float
    province: str
    district: str

    @property
    def occurred_at(self):
        """Event time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.time, tz=timezone.utc)

    def to_dict(self):
        return asdict(self)
