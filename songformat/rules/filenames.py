"""
Filename helpers.

Song, artist and album titles are free text; files and folders derived
from them need a plain ASCII key. Accents are folded to their base letter
("Mötley Crüe" → "MotleyCrue") and everything else that is not a letter or
digit is dropped ("AC/DC" → "ACDC").

Distinct titles can collapse to the same key. Callers that need unique
names must disambiguate on their own.
"""

import re
import unicodedata
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from songformat.data.schema import SongData

NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def get_safe_filename(text: Optional[str]) -> str:
    """Reduce arbitrary text to a filesystem-safe ASCII slug (possibly empty)."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    composed = unicodedata.normalize("NFC", stripped)
    return NON_ALPHANUMERIC.sub("", composed).strip()


def get_song_filename(song: "SongData", extension: str = "") -> str:
    """
    Build the "<Artist>-<Song>" key used for a song's files.

    Parts that sanitize to nothing are skipped. `extension` is appended
    as-is (include the dot).
    """
    parts = [get_safe_filename(song.artist_name), get_safe_filename(song.song_name)]
    return "-".join(part for part in parts if part) + extension
