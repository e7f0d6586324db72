# taqti/analysis/sections.py

import math
import logging
from typing import Dict, List, Sequence, Tuple

from taqti.models.syllable import Section, Syllable

logger = logging.getLogger(__name__)

# (max syllable count, number of sections); longer lines get five sections
SECTION_BUCKETS: Tuple[Tuple[int, int], ...] = (
    (4, 1),
    (6, 2),
    (9, 3),
    (12, 4),
)
MAX_SECTIONS = 5

ROMAN_FOOT_NAMES: Dict[int, List[str]] = {
    1: ["fe'lun"],
    2: ["fe'lun", "fe'lun"],
    3: ["fe'lun", "fa'lun", "fe'lun"],
    4: ["fe'lun", "fa'lun", "fe'lun", "fa'"],
    5: ["fe'lun", "fa'lun", "fe'lun", "fa'lun", "fe'"],
}

DEVANAGARI_FOOT_NAMES: Dict[int, List[str]] = {
    1: ["फ़ेलुन"],
    2: ["फ़ेलुन", "फ़ेलुन"],
    3: ["फ़ेलुन", "फ़अलुन", "फ़ेलुन"],
    4: ["फ़ेलुन", "फ़अलुन", "फ़ेलुन", "फ़अ"],
    5: ["फ़ेलुन", "फ़अलुन", "फ़ेलुन", "फ़अलुन", "फ़े"],
}


def section_count(syllable_count: int) -> int:
    """Number of sections a line with the given number of syllables is split into"""
    for max_count, sections in SECTION_BUCKETS:
        if syllable_count <= max_count:
            return sections
    return MAX_SECTIONS


class FootSegmenter:
    """
    Groups the weighted syllables of a line into named metrical feet.

    The number of feet depends only on the syllable count; syllables are
    distributed in chunks of ceil(N / k) so the last foot takes the remainder.
    Foot names are positional and cycle through the bucket's name list.
    """

    def __init__(self, names_by_bucket: Dict[int, List[str]] = None):
        self.names_by_bucket = names_by_bucket if names_by_bucket is not None else ROMAN_FOOT_NAMES

    def segment(self, syllables: Sequence[Syllable]) -> List[Section]:
        """
        Split syllables into contiguous sections.

        Args:
            syllables: Weighted syllables of one line

        Returns:
            Sections covering every syllable in order; empty for an empty line
        """
        total = len(syllables)
        if total == 0:
            return []

        count = section_count(total)
        chunk = math.ceil(total / count)
        names = self.names_by_bucket.get(count) or self.names_by_bucket[max(self.names_by_bucket)]

        sections = []
        for index in range(count):
            part = syllables[index * chunk:(index + 1) * chunk]
            if not part:
                continue
            sections.append(Section(
                name=names[index % len(names)],
                syllables=tuple(syllable.text for syllable in part),
                weights=tuple(str(syllable.weight) for syllable in part)
            ))

        logger.debug(f"Segmented {total} syllables into {len(sections)} sections")
        return sections
