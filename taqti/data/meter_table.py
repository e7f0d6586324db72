# taqti/data/meter_table.py

import logging
import unicodedata
from typing import Dict, List, Optional, Iterable, Tuple

from taqti.models.meter import MeterEntry

logger = logging.getLogger(__name__)


# (name, pattern, description, family)
# Each pattern is a sequence of 1 (short syllable) and 2 (long syllable).
METER_DEFINITIONS: Tuple[Tuple[str, str, str, str], ...] = (
    # Classical Arabic/Persian meters adapted for Hindi/Urdu
    ("मुतकारिब", "21", "फ़इलुन", "मुतकारिब"),
    ("रमल", "212", "फ़ाइलातुन", "रमल"),
    ("हज़ज", "212", "मफ़ऊलुन फ़ाइलुन", "हज़ज"),
    ("रजज़", "1221", "मुस्तफ़इलुन", "रजज़"),
    ("कामिल", "2122", "मुतफ़ाइलुन", "कामिल"),
    ("वाफ़िर", "1212", "मुफ़ाअलातुन", "वाफ़िर"),
    ("सरी", "2212", "मफ़ऊलातु मफ़ाइलुन", "सरी"),
    ("मुंसरिह", "12212", "मुस्तफ़इलुन मफ़ऊलातु", "मुंसरिह"),
    ("खफ़ीफ़", "12122", "फ़ाइलातुन मुस्तफ़इलुन फ़इलुन", "खफ़ीफ़"),
    ("मुज़ारि", "1212122", "मफ़ऊलुन फ़ाइलातुन मफ़ऊलुन फ़इलुन", "मुज़ारि"),
    ("मुकतज़ब", "12221", "मफ़ऊलातु मुस्तफ़इलुन", "मुकतज़ब"),
    ("मुजतस", "121221", "मुस्तफ़इलुन फ़ाइलातुन", "मुजतस"),

    # Common Hindi/Urdu variations
    ("मुतकारिब महज़ूफ़", "21212121", "फ़इलुन फ़इलुन फ़इलुन फ़इलुन", "मुतकारिब"),
    ("रमल महज़ूफ़", "212121212", "फ़ाइलातुन फ़ाइलातुन फ़इलुन", "रमल"),
    ("रमल सालिम", "21212121212", "फ़ाइलातुन फ़ाइलातुन फ़ाइलातुन", "रमल"),
    ("हज़ज अख़रब", "212212212212", "मफ़ाइलुन मफ़ाइलुन मफ़ाइलुन मफ़ाइलुन", "हज़ज"),
    ("कामिल सालिम", "2122212221222122", "मुतफ़ाइलुन मुतफ़ाइलुन मुतफ़ाइलुन मुतफ़ाइलुन", "कामिल"),

    # Popular ghazal meters
    ("बहर ए हज़ज मुसम्मन", "212122212122", "मफ़ऊलुन फ़ाइलातुन मफ़ऊलुन फ़इलुन", "हज़ज"),
    ("बहर ए रमल मुसम्मन", "212121221212122", "फ़ाइलातुन मफ़ाइलुन फ़ाइलातुन मफ़ाइलुन", "रमल"),
    ("बहर ए कामिल", "212221222122", "मुतफ़ाइलुन मुतफ़ाइलुन", "कामिल"),

    # Modern Hindi matrik meters
    ("१६ मात्रिक", "2222222222222222", "सोलह मात्रा का छंद", "मात्रिक"),
    ("१८ मात्रिक", "222222222222222222", "अठारह मात्रा का छंद", "मात्रिक"),
    ("२० मात्रिक", "22222222222222222222", "बीस मात्रा का छंद", "मात्रिक"),
    ("२२ मात्रिक", "2222222222222222222222", "बाईस मात्रा का छंद", "मात्रिक"),

    # Flexible patterns for mixed meters
    ("मिश्रित छोटा", "2121", "छोटा मिश्रित छंद", "मिश्रित"),
    ("मिश्रित मध्यम", "212122", "मध्यम मिश्रित छंद", "मिश्रित"),
    ("मिश्रित लंबा", "21212122212", "लंबा मिश्रित छंद", "मिश्रित"),
)


def _normalize_name(name: str) -> str:
    return unicodedata.normalize("NFC", name.strip()).replace("_", " ")


class MeterTable:
    """
    Read-only table of canonical bahr patterns.

    Entries keep their definition order; matching tiers that return several
    candidates with equal confidence rely on that order.
    """

    def __init__(self, entries: Optional[Iterable[MeterEntry]] = None):
        if entries is None:
            entries = (
                MeterEntry(name=name, pattern=pattern, description=description, family=family)
                for name, pattern, description, family in METER_DEFINITIONS
            )
        self._entries: Tuple[MeterEntry, ...] = tuple(entries)
        self._by_name: Dict[str, MeterEntry] = {}
        self._by_matra: Dict[int, List[MeterEntry]] = {}

        for entry in self._entries:
            if not entry.pattern or set(entry.pattern) - {"1", "2"}:
                raise ValueError(f"Invalid meter pattern for {entry.name}: {entry.pattern!r}")
            self._by_name[_normalize_name(entry.name)] = entry
            self._by_matra.setdefault(entry.matra_count, []).append(entry)

        logger.debug(f"Meter table initialized with {len(self._entries)} entries")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def get_all_meters(self) -> List[MeterEntry]:
        """Get all meters in definition order"""
        return list(self._entries)

    def get_meter(self, name: str) -> Optional[MeterEntry]:
        """
        Get a meter by name.

        Args:
            name: Meter name; underscores are accepted in place of spaces

        Returns:
            MeterEntry or None if not found
        """
        return self._by_name.get(_normalize_name(name))

    def get_meters_by_matra_count(self, matra_count: int) -> List[MeterEntry]:
        """Get meters whose pattern sums to the given number of matras"""
        return list(self._by_matra.get(matra_count, []))

    def get_meters_by_family(self, family: str) -> List[MeterEntry]:
        family = _normalize_name(family)
        return [entry for entry in self._entries if _normalize_name(entry.family) == family]

    def search_meters(self, query: str) -> List[MeterEntry]:
        """
        Search meters by name, description or pattern.

        Args:
            query: Search text

        Returns:
            List of matching meters
        """
        query = _normalize_name(query)
        if not query:
            return []

        results = []
        for entry in self._entries:
            if (query in _normalize_name(entry.name)
                    or query in _normalize_name(entry.description)
                    or query == entry.pattern):
                results.append(entry)
        return results


DEFAULT_METER_TABLE = MeterTable()
