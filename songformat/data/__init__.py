"""
Data Subpackage

This package handles everything related to song documents:
    - schema.py: Pydantic models defining the song data structure
    - drums.py: Drum kit enumerations and their lookups
    - serialization.py: Encoding/decoding of documents (INDENTED, CONDENSED)
    - storage.py: Loading and saving documents on disk

The top-level structure is SongData, which contains:
    - song, artist and album names
    - a global A440 tuning offset in cents
    - the list of instrument parts (tuning, capo)

Notes for each part live in their own documents (SongInstrumentNotes,
SongKeyboardNotes, SongDrumNotes), joined to the part by instrument name.
"""

from songformat.data.drums import (
    DrumArticulation,
    DrumKitPiece,
    DrumKitPieceType,
    get_default_articulation,
    get_kit_piece_type,
)
from songformat.data.schema import (
    CentsOffset,
    EmitPolicy,
    SongBeat,
    SongChord,
    SongData,
    SongDrumNote,
    SongDrumNotes,
    SongInstrumentNotes,
    SongInstrumentPart,
    SongInstrumentType,
    SongKeyboardNote,
    SongKeyboardNotes,
    SongNote,
    SongNoteTechnique,
    SongSection,
    SongStructure,
    SongVocal,
    StringTuning,
)
from songformat.data.serialization import (
    CONDENSED,
    INDENTED,
    CodecProfile,
    DocumentError,
    decode,
    decode_list,
    encode,
    get_profile,
)
