"""
Tuning Module - Display Names for Stringed-Instrument Tunings

Turns a list of per-string semitone offsets from standard tuning (lowest
string first) into the short label a player expects to see:

    [0, 0, 0, 0, 0, 0]         → "E Std"
    [-2, -2, -2, -2, -2, -2]   → "D Std"
    [-2, 0, 0, 0, 0, 0]        → "Drop D"
    [-4, -2, -2, -2, -2, -2]   → "D Drop C"
    [-2, -2, 0, 0, 0, -2]      → "Open G"
    [-2, 0, 0, 0, -2, -2]      → "DADGAD"

Tunings where every string but the lowest shares one offset are named by
key ("<key> Std" or "<key> Drop <note>"). Anything else is spelled out
string by string, and the spelled form is checked against a few well-known
open tunings.

The label is for display only. It is never stored in a song document.
"""

from typing import List, Optional, Sequence


# =============================================================================
# CONSTANTS
# =============================================================================

# Note names counted up in semitones from E, preferring sharps
SHARP_NOTES_FROM_E = ["E", "F", "F#", "G", "G#", "A", "A#", "B", "C", "C#", "D", "D#"]

# Same table preferring flats
FLAT_NOTES_FROM_E = ["E", "F", "Gb", "G", "Ab", "A", "Bb", "B", "C", "Db", "D", "Eb"]

# Standard tuning of each string as semitones above E (E A D G B E)
STRING_OFFSETS_FROM_E = (0, 5, 10, 3, 7, 0)

# Spelled-out tunings that have a common name
OPEN_TUNINGS = {
    "DGDGBD": "Open G",
    "DADF#AD": "Open D",
    "EBEG#BE": "Open E",
    "EAEAC#E": "Open A",
    "CGCGCE": "Open C",
}

STANDARD_TUNING_NAME = "E Std"

# Fewer strings than this and we don't try to name the tuning
MIN_NAMED_STRINGS = 4


# =============================================================================
# NOTE LOOKUP
# =============================================================================

def _lookup_note(offset: int, table: List[str]) -> Optional[str]:
    # Negative offsets are corrected by a single octave only
    if offset < 0:
        offset += 12
    if offset < 0:
        return None
    return table[offset % 12]


def get_offset_note_sharp(offset: int) -> Optional[str]:
    """Get the note name `offset` semitones from E, using sharps."""
    return _lookup_note(offset, SHARP_NOTES_FROM_E)


def get_offset_note_flat(offset: int) -> Optional[str]:
    """Get the note name `offset` semitones from E, using flats."""
    return _lookup_note(offset, FLAT_NOTES_FROM_E)


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def is_offset_from_standard(offsets: Sequence[int]) -> bool:
    """
    Check if a tuning is offset from standard (including drop tunings).

    True when every string from the second one up shares the second
    string's offset. The lowest string is free to differ.
    """
    return all(offset == offsets[1] for offset in offsets[2:])


def get_tuning_as_notes(offsets: Sequence[int]) -> str:
    """
    Spell a tuning out note by note, recognizing common open tunings.

    Strings past the sixth have no standard pitch in the table and are
    treated as E. A string whose note can't be named adds nothing.

    Examples:
        get_tuning_as_notes([-2, -2, 0, 0, 0, -2])  → "Open G"
        get_tuning_as_notes([-2, 0, 0, 0, -2, -2])  → "DADGAD"
    """
    notes = []
    for string_index, offset in enumerate(offsets):
        if string_index < len(STRING_OFFSETS_FROM_E):
            offset += STRING_OFFSETS_FROM_E[string_index]
        notes.append(get_offset_note_sharp(offset) or "")

    tuning = "".join(notes)
    return OPEN_TUNINGS.get(tuning, tuning)


def get_tuning_name(offsets: Optional[Sequence[int]]) -> str:
    """
    Get the display name of a tuning.

    Args:
        offsets: Semitone offset of each string from standard tuning,
                 lowest string first. May be None.

    Returns:
        A display name such as "E Std", "Drop D", "C# Drop B" or "Open G".
        Never None.
    """
    # If we don't have enough offsets, assume E Standard
    if not offsets or len(offsets) < MIN_NAMED_STRINGS:
        return STANDARD_TUNING_NAME

    if not is_offset_from_standard(offsets):
        return get_tuning_as_notes(offsets)

    if offsets[1] < 0:
        key = get_offset_note_flat(offsets[1])
    else:
        key = get_offset_note_sharp(offsets[1])

    if key is None:
        return get_tuning_as_notes(offsets)

    if offsets[0] == offsets[1]:
        return f"{key} Std"

    drop = get_offset_note_flat(offsets[0])
    if drop is None:
        return get_tuning_as_notes(offsets)

    if key == "E":
        return f"Drop {drop}"

    return f"{key} Drop {drop}"


# =============================================================================
# TESTING
# =============================================================================

if __name__ == "__main__":
    print("=" * 60)
    print("Testing tuning.py")
    print("=" * 60)

    examples = [
        [],
        [0, 0, 0, 0, 0, 0],
        [-1, -1, -1, -1, -1, -1],
        [-2, 0, 0, 0, 0, 0],
        [-4, -2, -2, -2, -2, -2],
        [-2, -2, 0, 0, 0, -2],
        [-2, 0, 0, 0, -2, -2],
        [-5, 0, 0, 0],
    ]
    for offsets in examples:
        print(f"  {str(offsets):28} → {get_tuning_name(offsets)}")
