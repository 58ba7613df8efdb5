"""Timezone catalogue: alias normalisation, validation and default selection."""

from __future__ import annotations

import logging
import os
import zoneinfo
from collections.abc import Iterable
from importlib import resources
from zoneinfo import ZoneInfo

from .errors import UnknownTimezone

logger = logging.getLogger("mineday")

# Legacy names some platforms still report, mapped to their current ids.
TIMEZONE_ALIASES: dict[str, str] = {
    "Asia/Calcutta": "Asia/Kolkata",
    "Asia/Saigon": "Asia/Ho_Chi_Minh",
    "Asia/Katmandu": "Asia/Kathmandu",
    "Asia/Rangoon": "Asia/Yangon",
    "Europe/Kiev": "Europe/Kyiv",
    "Pacific/Ponape": "Pacific/Pohnpei",
    "Pacific/Truk": "Pacific/Chuuk",
    "Atlantic/Faeroe": "Atlantic/Faroe",
    "Etc/UTC": "UTC",
    "Etc/GMT": "UTC",
}

FALLBACK_TIMEZONES: tuple[str, ...] = (
    "UTC",
    "Africa/Cairo", "Africa/Johannesburg",
    "America/Argentina/Buenos_Aires", "America/Bogota", "America/Chicago",
    "America/Denver", "America/Halifax", "America/Lima", "America/Los_Angeles",
    "America/Mexico_City", "America/New_York", "America/Sao_Paulo",
    "America/St_Johns", "America/Toronto", "America/Vancouver",
    "Asia/Bangkok", "Asia/Dhaka", "Asia/Dubai", "Asia/Hong_Kong",
    "Asia/Kolkata", "Asia/Seoul", "Asia/Shanghai",
    "Asia/Singapore", "Asia/Tokyo",
    "Australia/Melbourne", "Australia/Perth", "Australia/Sydney",
    "Europe/Amsterdam", "Europe/Berlin", "Europe/London", "Europe/Madrid",
    "Europe/Moscow", "Europe/Paris", "Europe/Rome", "Europe/Stockholm",
    "Pacific/Auckland",
)

_EXCLUDED_PREFIXES = ("posix/", "right/", "SystemV/")
_EXCLUDED_NAMES = {"posixrules", "localtime", "Factory"}


def normalize_timezone_id(name: str | None) -> str:
    """Strip whitespace and map legacy aliases to their modern id."""
    if name is None:
        return ""
    s = str(name).strip()
    return TIMEZONE_ALIASES.get(s, s)


def parse_zone_tab(text: str) -> list[str]:
    """Zone ids from the third column of a ``zone.tab`` style table."""
    ids = []
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        columns = line.split("\t")
        if len(columns) >= 3:
            ids.append(columns[2].strip())
    return ids


def canonical_timezone_ids() -> list[str]:
    """Canonical zone ids from the ``tzdata`` package, plus ``UTC``.

    ``zoneinfo.available_timezones()`` also yields the backward-compatible
    link names (``US/Eastern``, ``Japan``, ``America/Buenos_Aires``), which
    would list one zone under several ids. ``zone.tab`` names each real zone
    once.
    """
    tab = resources.files("tzdata") / "zoneinfo" / "zone.tab"
    return parse_zone_tab(tab.read_text(encoding="utf-8")) + ["UTC"]


def build_catalogue(raw: Iterable[str] | None = None) -> tuple[str, ...]:
    """Return a deduplicated, alias-normalised, sorted tuple of timezone ids.

    ``raw`` defaults to the canonical zones shipped with ``tzdata``. When they
    cannot be read the static fallback list is used.
    """
    if raw is None:
        try:
            raw = canonical_timezone_ids()
        except (OSError, ModuleNotFoundError) as exc:
            logger.warning("[MineDay] Could not enumerate timezones: %s", exc)
            raw = ()

    names = {
        normalize_timezone_id(n)
        for n in raw
        if n and n not in _EXCLUDED_NAMES and not n.startswith(_EXCLUDED_PREFIXES)
    }
    names.discard("")
    if not names:
        names = {normalize_timezone_id(n) for n in FALLBACK_TIMEZONES}
    return tuple(sorted(names))


# Built once at import; never mutated.
TIMEZONES: tuple[str, ...] = build_catalogue()
_TIMEZONE_SET = frozenset(TIMEZONES)


def is_supported(name: str | None) -> bool:
    return normalize_timezone_id(name) in _TIMEZONE_SET


def resolve_timezone(name: str | None) -> ZoneInfo:
    """Resolve a catalogue timezone id into a ZoneInfo.

    Raises UnknownTimezone for ids outside the catalogue or missing from the
    tz database.
    """
    tz_id = normalize_timezone_id(name)
    if tz_id not in _TIMEZONE_SET:
        raise UnknownTimezone(name)
    try:
        return ZoneInfo(tz_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimezone(name) from exc


def host_timezone_name(
    localtime: str = "/etc/localtime", timezone_file: str = "/etc/timezone"
) -> str | None:
    """IANA id of the host's own zone, or None when it cannot be determined.

    Reads the ``zoneinfo/<id>`` target of the ``localtime`` symlink, then the
    Debian-style ``timezone`` file.
    """
    target = os.path.realpath(localtime)
    marker = "zoneinfo" + os.sep
    if marker in target:
        return target.rsplit(marker, 1)[1]
    try:
        with open(timezone_file, encoding="utf-8") as fh:
            name = fh.read().strip()
    except OSError:
        return None
    return name or None


def default_timezone(persisted: str | None = None) -> str:
    """Pick the initial timezone.

    Order: a persisted selection, ``MINEDAY_TIMEZONE``, ``TZ``, the host's own
    zone, then the first catalogue entry.
    """
    candidates = (
        persisted,
        os.environ.get("MINEDAY_TIMEZONE"),
        os.environ.get("TZ"),
        host_timezone_name(),
    )
    for candidate in candidates:
        if candidate and is_supported(candidate):
            return normalize_timezone_id(candidate)
    return TIMEZONES[0]


def filter_timezones(query: str | None, catalogue: Iterable[str] = TIMEZONES) -> list[str]:
    """Case-insensitive substring filter used by selection widgets."""
    if not query:
        return list(catalogue)
    q = query.lower()
    return [tz for tz in catalogue if q in tz.lower()]
