"""Pydantic models for timedate-status."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TimeStatus(BaseModel):
    """Snapshot of the system clock configuration reported by timedatectl."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    local_time: datetime | None = Field(None, description="Current local time")
    rtc_time: datetime | None = Field(None, description="Current hardware clock (RTC) time")
    rtc_in_local_time: bool = Field(
        False,
        alias="rtc_in_localtime",
        description="Whether the RTC is kept in local time rather than UTC",
    )
    location: str = Field("UTC", description="IANA timezone name")
    ntp_synchronized: bool = Field(False, description="Whether the clock is NTP-synchronized")
    ntp_enabled: bool = Field(False, description="Whether NTP synchronization is enabled")

    def to_json(self) -> str:
        """Serialize to compact JSON using the public field names."""
        return self.model_dump_json(by_alias=True)
