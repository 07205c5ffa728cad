"""Accept-Language parsing for locale redirects."""

import re
from dataclasses import dataclass, field
from typing import List, Optional

# Two letter language, optional two letter region, then end or quality value
_PREFERENCE_PATTERN = re.compile(r"^([a-z]{2})(?:-([a-z]{2}))?(?:$|;)")


@dataclass(frozen=True)
class PreferenceEntry:
    """One language range from an Accept-Language header."""

    language: str
    region: Optional[str] = None


@dataclass
class AcceptedPreferences:
    """Ordered language and region priorities of a visitor."""

    languages: List[str] = field(default_factory=list)
    regions: List[str] = field(default_factory=list)

    @classmethod
    def from_header(cls, header: Optional[str]) -> Optional["AcceptedPreferences"]:
        """Build priorities from a raw header.

        Returns None when the header is missing or none of its entries parse.
        An empty region priority is not a failure.
        """
        entries = parse_preference_header(header)
        if not entries:
            return None

        languages = get_language_priority(entries)
        if not languages:
            return None

        return cls(languages=languages, regions=get_region_priority(entries))


def parse_preference_entry(segment: str) -> Optional[PreferenceEntry]:
    """Parse a single header segment, returning None if it is malformed."""
    match = _PREFERENCE_PATTERN.match(segment.strip().lower())
    if not match:
        return None
    return PreferenceEntry(language=match.group(1), region=match.group(2))


def parse_preference_header(
    header: Optional[str] = None,
) -> Optional[List[Optional[PreferenceEntry]]]:
    """Parse an Accept-Language header into entries in listed order.

    Quality values are ignored; order is taken as written. Segments that do
    not look like ``xx`` or ``xx-yy`` are kept as None so callers can tell a
    malformed header from an absent one.
    """
    if not header:
        return None

    return [parse_preference_entry(segment) for segment in header.split(",")]


def get_language_priority(entries: List[Optional[PreferenceEntry]]) -> List[str]:
    """Deduplicated language codes, first occurrence wins."""
    languages: List[str] = []
    for entry in entries:
        if entry is not None and entry.language not in languages:
            languages.append(entry.language)
    return languages


def get_region_priority(entries: List[Optional[PreferenceEntry]]) -> List[str]:
    """Deduplicated region codes across all entries, first occurrence wins."""
    regions: List[str] = []
    for entry in entries:
        if entry is not None and entry.region and entry.region not in regions:
            regions.append(entry.region)
    return regions
