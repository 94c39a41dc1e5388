from chirp_sdk.models.base import ChirpModel


class TimeZone(ChirpModel):
    name: str | None = None
    utc_offset: int | None = None
    tzinfo_name: str | None = None


class SleepTime(ChirpModel):
    enabled: bool = False
    start_time: int | None = None
    end_time: int | None = None


class TrendLocation(ChirpModel):
    woeid: int
    name: str | None = None
    country: str | None = None
    country_code: str | None = None


class AccountSettings(ChirpModel):
    screen_name: str
    language: str | None = None
    protected: bool = False
    discoverable_by_email: bool = False
    discoverable_by_mobile_phone: bool = False
    allow_dms_from: str | None = None
    always_use_https: bool = True
    time_zone: TimeZone | None = None
    sleep_time: SleepTime | None = None
    trend_location: list[TrendLocation] = []
