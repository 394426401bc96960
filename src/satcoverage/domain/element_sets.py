# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Two-line element set records and the text parser that produces them.

Raw element text is a sequence of (name, line 1, line 2) triplets as served
by CelesTrak's TLE format. Bare line pairs without a name line are also
accepted. Malformed entries are skipped; parsing never fails the batch.
"""
from dataclasses import dataclass
from datetime import datetime

_LINE1_MARKER = "1 "
_LINE2_MARKER = "2 "
_NORAD_COLUMNS = slice(2, 7)  # columns 3-7 of line 1


@dataclass(frozen=True)
class SatelliteRecord:
    """One satellite's element set, as parsed from raw text."""
    norad_id: int
    name: str
    line1: str
    line2: str


@dataclass(frozen=True)
class ElementSet:
    """Raw element text for a constellation and the time it was fetched."""
    constellation_id: str
    raw_text: str
    fetched_at: datetime


def _norad_id(line1: str) -> int | None:
    try:
        norad_id = int(line1[_NORAD_COLUMNS])
    except ValueError:
        return None
    return norad_id if norad_id > 0 else None


def _clean_name(line: str) -> str:
    name = line.strip()
    # 3LE format prefixes the name line with "0 "
    if name.startswith("0 "):
        name = name[2:].strip()
    return name


def parse_element_sets(raw_text: str, max_records: int) -> list[SatelliteRecord]:
    """
    Parse raw TLE text into at most max_records satellite records.

    A record is accepted only when line 1 starts with "1 " and line 2 with
    "2 ", and line 1 carries a positive NORAD catalog number. Duplicate
    catalog numbers within one batch keep the first occurrence.

    Args:
        raw_text: Element text, triplets or bare line pairs.
        max_records: Upper bound on records returned; parsing stops there.

    Returns:
        Records in source order.
    """
    if max_records <= 0:
        return []

    lines = [line.rstrip() for line in raw_text.splitlines() if line.strip()]
    records: list[SatelliteRecord] = []
    seen: set[int] = set()

    i = 0
    while i < len(lines) and len(records) < max_records:
        if (
            i + 2 < len(lines)
            and lines[i + 1].startswith(_LINE1_MARKER)
            and lines[i + 2].startswith(_LINE2_MARKER)
        ):
            name, line1, line2 = _clean_name(lines[i]), lines[i + 1], lines[i + 2]
            i += 3
        elif (
            i + 1 < len(lines)
            and lines[i].startswith(_LINE1_MARKER)
            and lines[i + 1].startswith(_LINE2_MARKER)
        ):
            name, line1, line2 = "", lines[i], lines[i + 1]
            i += 2
        else:
            i += 1
            continue

        norad_id = _norad_id(line1)
        if norad_id is None or norad_id in seen:
            continue
        seen.add(norad_id)
        records.append(SatelliteRecord(
            norad_id=norad_id,
            name=name or str(norad_id),
            line1=line1,
            line2=line2,
        ))

    return records
