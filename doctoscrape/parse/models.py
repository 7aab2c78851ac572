"""Data models for the detail endpoint payload."""
from pydantic import BaseModel, ConfigDict, Field


class _Response(BaseModel):
    # The upstream payload carries many more fields than we read.
    model_config = ConfigDict(extra="ignore", frozen=True)


class SlotResponse(_Response):
    """A single bookable time window."""

    agenda_id: int = Field(..., ge=0, description="Scheduling agenda id")
    start_date: str = Field(..., description="ISO 8601 timestamp with offset, kept verbatim")
    end_date: str = Field(..., description="ISO 8601 timestamp with offset, kept verbatim")


class AvailabilityResponse(_Response):
    """Open slots for one calendar date."""

    date: str
    slots: list[SlotResponse]


class CenterResponse(_Response):
    address: str
    city: str
    name_with_title: str
    zipcode: str
    url: str = Field(..., description="Site-relative path to the center page")


class DetailResponse(_Response):
    """Decoded body of search_results/{id}.json."""

    availabilities: list[AvailabilityResponse]
    search_result: CenterResponse

    def start_dates(self) -> list[str]:
        """All slot start dates, availability order then slot order."""
        return [
            slot.start_date
            for availability in self.availabilities
            for slot in availability.slots
        ]
