import logging
import re
from typing import Any, NamedTuple, Optional

logger = logging.getLogger(__name__)

AUDIO_BASE_URL: str = "https://www.everyayah.com/data/Husary_128kbps"

QUOTE_KEYS = ("quran", "quran2")

# Al-Baqarah, the longest surah
MAX_SURAH_VERSES = 286

REFERENCE_PATTERN = re.compile(
    r"""
    \bQ(?:ur['’]?an)?
    \s*
    (?P<chapter>\d+)
    \s*:\s*
    (?P<start>\d+)
    (?:
        \s*[–-]\s*
        (?P<end>\d+)
    )?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


class VerseRef(NamedTuple):
    chapter: int
    verse: int


def parse_reference(ref: Optional[str]) -> list[VerseRef]:
    """
    Parses a short Qur'an citation into the verses it covers:
    - Q 2:286        -> [(2, 286)]
    - Q 94:5–6       -> [(94, 5), (94, 6)]
    - Qur'an 39:53   -> [(39, 53)]

    Anything without a chapter:verse pair (e.g. "Bukhari 6114") yields [].
    A range whose end is before its start also yields [].
    """
    if not ref:
        return []

    match = REFERENCE_PATTERN.search(ref)
    if not match:
        return []

    chapter = int(match.group("chapter"))
    start = int(match.group("start"))
    end = int(match.group("end")) if match.group("end") else start

    if end < start:
        logger.debug("inverted verse range ref=%s", ref)
    elif end - start + 1 > MAX_SURAH_VERSES:
        logger.debug("verse range longer than any surah ref=%s count=%d", ref, end - start + 1)

    return [VerseRef(chapter, verse) for verse in range(start, end + 1)]


def audio_url(verse: VerseRef) -> str:
    chapter_num, verse_num = verse
    return f"{AUDIO_BASE_URL}/{chapter_num:03d}{verse_num:03d}.mp3"


def audio_urls(ref: Optional[str]) -> list[str]:
    return [audio_url(v) for v in parse_reference(ref)]


def attach_audio(payload: Any) -> Any:
    """Add an `audio` list to each Qur'an quote in `payload["mapped"]` that carries a `ref`."""
    if not isinstance(payload, dict):
        return payload

    mapped = payload.get("mapped")
    if not isinstance(mapped, dict):
        return payload

    for key in QUOTE_KEYS:
        quote = mapped.get(key)
        if not isinstance(quote, dict):
            continue

        ref = quote.get("ref")
        if not isinstance(ref, str):
            continue

        quote["audio"] = audio_urls(ref)
        logger.info("audio_attached quote=%s ref=%s count=%d", key, ref, len(quote["audio"]))

    return payload
