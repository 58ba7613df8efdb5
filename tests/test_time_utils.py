import pytest

from mineday import (
    CivilDateTime,
    UnknownTimezone,
    civil_from_instant,
    civil_in_utc,
    format_utc_offset,
    instant_from_civil,
    utc_offset_label,
)


def _utc_ms(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    return CivilDateTime(year=year, month=month, day=day, hour=hour, minute=minute).epoch_ms_as_utc()


def _civil(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0):
    return CivilDateTime(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )


def test_civil_from_epoch_zero() -> None:
    assert civil_from_instant(0, "UTC") == _civil(1970, 1, 1)


def test_civil_from_instant_half_hour_zone() -> None:
    civil = civil_from_instant(_utc_ms(2024, 1, 15), "Asia/Kolkata")
    assert civil == _civil(2024, 1, 15, 5, 30)


def test_civil_from_instant_floors_milliseconds() -> None:
    civil = civil_from_instant(_utc_ms(2024, 1, 15) + 59_999, "UTC")
    assert civil == _civil(2024, 1, 15, 0, 0, 59)


def test_alias_is_normalised() -> None:
    ms = _utc_ms(2024, 1, 15, 12)
    assert civil_from_instant(ms, "Asia/Calcutta") == civil_from_instant(ms, "Asia/Kolkata")


def test_unknown_timezone_raises() -> None:
    with pytest.raises(UnknownTimezone) as info:
        civil_from_instant(0, "Mars/Olympus_Mons")
    assert info.value.timezone_id == "Mars/Olympus_Mons"


def test_instant_from_civil_daylight_time() -> None:
    # EDT is UTC-4.
    ms = instant_from_civil(_civil(2024, 7, 1, 12, 0), "America/New_York")
    assert ms == _utc_ms(2024, 7, 1, 16, 0)


@pytest.mark.parametrize(
    "tz",
    [
        "UTC",
        "Asia/Kolkata",
        "Asia/Kathmandu",
        "America/St_Johns",
        "America/Los_Angeles",
        "Europe/London",
        "Australia/Sydney",
        "Pacific/Auckland",
    ],
)
@pytest.mark.parametrize(
    "civil",
    [
        _civil(2024, 1, 15, 0, 0),
        _civil(2024, 2, 29, 23, 59, 30),
        _civil(2024, 7, 1, 12, 45),
        _civil(2023, 12, 31, 23, 30),
    ],
)
def test_round_trip_outside_transitions(tz: str, civil: CivilDateTime) -> None:
    assert civil_from_instant(instant_from_civil(civil, tz), tz) == civil


def test_spring_forward_gap_returns_last_guess() -> None:
    # 02:30 does not exist in New York on 2024-03-10; the iteration stops
    # after its fixed bound on a neighbouring wall-clock time.
    civil = _civil(2024, 3, 10, 2, 30)
    ms = instant_from_civil(civil, "America/New_York")
    landed = civil_from_instant(ms, "America/New_York")
    assert landed != civil
    assert (landed.hour, landed.minute) in {(1, 30), (3, 30)}


def test_fall_back_fold_returns_one_of_the_instants() -> None:
    civil = _civil(2024, 11, 3, 1, 30)
    ms = instant_from_civil(civil, "America/New_York")
    assert civil_from_instant(ms, "America/New_York") == civil
    assert ms in {_utc_ms(2024, 11, 3, 5, 30), _utc_ms(2024, 11, 3, 6, 30)}


@pytest.mark.parametrize(
    ("tz", "at", "expected"),
    [
        ("Asia/Kolkata", (2024, 6, 1), "UTC+5:30"),
        ("America/Los_Angeles", (2024, 1, 15), "UTC-8"),
        ("America/Los_Angeles", (2024, 7, 15), "UTC-7"),
        ("Asia/Kathmandu", (2024, 6, 1), "UTC+5:45"),
        ("America/St_Johns", (2024, 1, 15), "UTC-3:30"),
        ("UTC", (2024, 1, 15), "UTC+0"),
        ("Asia/Tokyo", (2024, 1, 15), "UTC+9"),
    ],
)
def test_utc_offset_label(tz: str, at: tuple[int, int, int], expected: str) -> None:
    assert utc_offset_label(tz, _utc_ms(*at, 12)) == expected


def test_format_utc_offset_negative_minutes() -> None:
    assert format_utc_offset(-210) == "UTC-3:30"
    assert format_utc_offset(0) == "UTC+0"
    assert format_utc_offset(345) == "UTC+5:45"


def test_civil_in_utc() -> None:
    assert civil_in_utc(_utc_ms(2024, 5, 10, 7, 5)) == _civil(2024, 5, 10, 7, 5)
