import datetime


def get_utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


def get_local_now(utc_offset_hours: int) -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone(datetime.timedelta(hours=utc_offset_hours)))


def get_local_date(utc_offset_hours: int) -> datetime.date:
    """Calendar day at the configured offset, used to bucket earnings per day."""
    return get_local_now(utc_offset_hours).date()


def get_utc_iso_now() -> str:
    return get_utc_now().isoformat()
