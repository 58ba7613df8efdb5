import os

import pytest

from mineday import (
    FALLBACK_TIMEZONES,
    TIMEZONE_ALIASES,
    TIMEZONES,
    UnknownTimezone,
    build_catalogue,
    default_timezone,
    filter_timezones,
    host_timezone_name,
    is_supported,
    normalize_timezone_id,
    resolve_timezone,
)
from mineday.catalogue import canonical_timezone_ids, parse_zone_tab


def test_build_catalogue_normalises_dedupes_and_sorts() -> None:
    raw = ["UTC", "Europe/Kiev", "Asia/Kolkata", "Asia/Calcutta"]
    assert build_catalogue(raw) == ("Asia/Kolkata", "Europe/Kyiv", "UTC")


def test_build_catalogue_skips_non_zone_entries() -> None:
    raw = ["posix/Europe/Paris", "right/UTC", "Europe/Paris", "localtime", "posixrules"]
    assert build_catalogue(raw) == ("Europe/Paris",)


def test_build_catalogue_falls_back_when_host_has_none() -> None:
    catalogue = build_catalogue([])
    assert catalogue == tuple(sorted(FALLBACK_TIMEZONES))
    assert "UTC" in catalogue
    assert 30 <= len(catalogue) <= 40


def test_module_catalogue_invariants() -> None:
    assert list(TIMEZONES) == sorted(set(TIMEZONES))
    assert not set(TIMEZONE_ALIASES) & set(TIMEZONES)
    assert "Asia/Kolkata" in TIMEZONES
    assert "UTC" in TIMEZONES


def test_normalize_timezone_id() -> None:
    assert normalize_timezone_id(" Asia/Saigon ") == "Asia/Ho_Chi_Minh"
    assert normalize_timezone_id(None) == ""
    assert normalize_timezone_id("Europe/Paris") == "Europe/Paris"


def test_resolve_timezone() -> None:
    assert resolve_timezone("Asia/Calcutta").key == "Asia/Kolkata"
    assert is_supported("Atlantic/Faeroe")
    with pytest.raises(UnknownTimezone):
        resolve_timezone("Mars/Base")
    with pytest.raises(UnknownTimezone):
        resolve_timezone("")


def test_default_timezone_prefers_persisted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINEDAY_TIMEZONE", "Europe/Paris")
    assert default_timezone("Asia/Calcutta") == "Asia/Kolkata"


def test_default_timezone_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINEDAY_TIMEZONE", "Europe/Paris")
    assert default_timezone("Nowhere/Zone") == "Europe/Paris"

    monkeypatch.delenv("MINEDAY_TIMEZONE")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    assert default_timezone(None) == "Asia/Tokyo"


def test_default_timezone_last_resort(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MINEDAY_TIMEZONE", raising=False)
    monkeypatch.delenv("TZ", raising=False)
    monkeypatch.setattr("mineday.catalogue.host_timezone_name", lambda: None)
    assert default_timezone("Nowhere/Zone") == TIMEZONES[0]


def test_filter_timezones() -> None:
    assert "Asia/Kolkata" in filter_timezones("KOLK")
    assert filter_timezones("") == list(TIMEZONES)
    assert filter_timezones("zzzz-no-match") == []


def test_catalogue_lists_each_zone_once() -> None:
    # Backward-compatible link names stay out of the catalogue.
    for link in ("US/Eastern", "America/Buenos_Aires", "Asia/Chongqing", "Japan", "Cuba", "EST5EDT"):
        assert link not in TIMEZONES
    assert "America/Argentina/Buenos_Aires" in TIMEZONES
    assert "Asia/Shanghai" in TIMEZONES
    assert "Etc/UTC" not in TIMEZONES


def test_canonical_ids_come_from_tzdata() -> None:
    ids = canonical_timezone_ids()
    assert "UTC" in ids
    assert "Europe/Kyiv" in ids
    assert "US/Pacific" not in ids


def test_parse_zone_tab() -> None:
    text = (
        "# tzdb timezone descriptions\n"
        "#\n"
        "AR\t-3436-05827\tAmerica/Argentina/Buenos_Aires\tBuenos Aires (BA, CF)\n"
        "JP\t+353916+1394441\tAsia/Tokyo\n"
        "\n"
        "broken line\n"
    )
    assert parse_zone_tab(text) == ["America/Argentina/Buenos_Aires", "Asia/Tokyo"]


def test_host_timezone_from_localtime_link(tmp_path) -> None:
    zone_file = tmp_path / "zoneinfo" / "Asia" / "Tokyo"
    zone_file.parent.mkdir(parents=True)
    zone_file.write_bytes(b"TZif")
    link = tmp_path / "localtime"
    os.symlink(zone_file, link)

    assert host_timezone_name(str(link), str(tmp_path / "missing")) == "Asia/Tokyo"


def test_host_timezone_from_timezone_file(tmp_path) -> None:
    plain = tmp_path / "localtime"
    plain.write_bytes(b"TZif")
    timezone_file = tmp_path / "timezone"
    timezone_file.write_text("Europe/Paris\n")

    assert host_timezone_name(str(plain), str(timezone_file)) == "Europe/Paris"
    assert host_timezone_name(str(plain), str(tmp_path / "missing")) is None


def test_default_timezone_uses_host_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MINEDAY_TIMEZONE", raising=False)
    monkeypatch.delenv("TZ", raising=False)

    monkeypatch.setattr("mineday.catalogue.host_timezone_name", lambda: "Asia/Calcutta")
    assert default_timezone(None) == "Asia/Kolkata"

    monkeypatch.setattr("mineday.catalogue.host_timezone_name", lambda: "Etc/UTC")
    assert default_timezone(None) == "UTC"

    monkeypatch.setattr("mineday.catalogue.host_timezone_name", lambda: "Nowhere/Zone")
    assert default_timezone(None) == TIMEZONES[0]
