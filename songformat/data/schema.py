"""
Schema definitions for song documents.

This module defines the Pydantic models that make up a song chart: song
metadata, instrument parts, song structure and the per-part note
timelines. Authoring tools build these models in memory; the codec in
`songformat.data.serialization` turns them into documents and back.

Field conventions:
    - Attributes are snake_case; the document name of each field is its
      alias (e.g. `song_name` ↔ "SongName").
    - Integers that can be "unset" use -1, never 0 (0 is an open string,
      a valid note number, ...). They are omitted from documents when -1.
    - Time offsets are always written, even when zero.
    - Everything else is omitted when it equals its default.

Each field's emit rule is declared with the field itself (see EmitPolicy),
so the codec never has to guess.

Example:
    >>> song = SongData(song_name="Song", artist_name="Artist")
    >>> song.add_or_replace_part(SongInstrumentPart(
    ...     instrument_name="Lead",
    ...     instrument_type=SongInstrumentType.LEAD_GUITAR,
    ...     tuning=StringTuning(string_semitone_offsets=[-2, 0, 0, 0, 0, 0]),
    ... ))
    >>> str(song.instrument_parts[0])
    'Lead (Drop D)'
"""

from enum import Enum, IntFlag
from typing import Annotated, Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.fields import FieldInfo

from songformat.data.drums import (
    DrumArticulation,
    DrumKitPiece,
    DrumKitPieceType,
    get_default_articulation,
    get_kit_piece_type,
)
from songformat.rules import tuning as tuning_rules


# =============================================================================
# FIELD EMIT POLICIES
# =============================================================================

class EmitPolicy(str, Enum):
    """When a field is written to a song document."""
    OMIT_IF_DEFAULT = "default"    # skip when equal to the field default
    OMIT_IF_SENTINEL = "sentinel"  # skip when -1, decode absent as -1
    ALWAYS_EMIT = "always"


UNSET = -1


def always_emit(alias: str, default: Any = 0.0, **kwargs: Any) -> Any:
    """A field that is written regardless of its value."""
    return Field(
        default=default,
        alias=alias,
        json_schema_extra={"emit": EmitPolicy.ALWAYS_EMIT.value},
        **kwargs,
    )


def sentinel(alias: str, default: int = UNSET, **kwargs: Any) -> Any:
    """An integer field where -1 means unset."""
    return Field(
        default=default,
        alias=alias,
        json_schema_extra={"emit": EmitPolicy.OMIT_IF_SENTINEL.value},
        **kwargs,
    )


def get_emit_policy(field: FieldInfo) -> EmitPolicy:
    extra = field.json_schema_extra
    if isinstance(extra, dict) and "emit" in extra:
        return EmitPolicy(extra["emit"])
    return EmitPolicy.OMIT_IF_DEFAULT


# =============================================================================
# ENUMERATIONS
# =============================================================================

class SongInstrumentType(str, Enum):
    """The type of instrument."""
    LEAD_GUITAR = "LeadGuitar"
    RHYTHM_GUITAR = "RhythmGuitar"
    BASS_GUITAR = "BassGuitar"
    KEYS = "Keys"
    DRUMS = "Drums"
    VOCALS = "Vocals"


class SongNoteTechnique(IntFlag):
    """
    Technique flags for a note. Combine with `|`, test with `in` or `&`.

    Bit positions are part of the file format and must never change.
    """
    HAMMER_ON = 1 << 1
    PULL_OFF = 1 << 2
    ACCENT = 1 << 3
    PALM_MUTE = 1 << 4
    FRET_HAND_MUTE = 1 << 5
    SLIDE = 1 << 6
    BEND = 1 << 7
    TREMOLO = 1 << 8
    VIBRATO = 1 << 9
    HARMONIC = 1 << 10
    PINCH_HARMONIC = 1 << 11
    TAP = 1 << 12
    SLAP = 1 << 13
    POP = 1 << 14
    CHORD = 1 << 15
    CHORD_NOTE = 1 << 16
    CONTINUED = 1 << 17
    ARPEGGIO = 1 << 18

    @property
    def symbol(self) -> str:
        """Document symbol of a single flag (HAMMER_ON → "HammerOn")."""
        return "".join(part.capitalize() for part in self.name.split("_"))


NO_TECHNIQUE = SongNoteTechnique(0)

_TECHNIQUE_FLAGS = list(SongNoteTechnique.__members__.values())
_TECHNIQUES_BY_SYMBOL = {flag.symbol: flag for flag in _TECHNIQUE_FLAGS}


def technique_to_symbols(techniques: SongNoteTechnique) -> str:
    """
    Write technique flags as comma-separated symbols.

    Example:
        technique_to_symbols(SongNoteTechnique.HAMMER_ON | SongNoteTechnique.SLIDE)
        → "HammerOn, Slide"

    Raises:
        ValueError: If the value has bits set that have no flag name
    """
    value = int(techniques)
    symbols = []
    for flag in _TECHNIQUE_FLAGS:
        if value & int(flag):
            symbols.append(flag.symbol)
            value &= ~int(flag)
    if value:
        raise ValueError(f"Technique value {int(techniques)} has unnamed bits: {value}")
    return ", ".join(symbols)


def technique_from_symbols(text: str) -> SongNoteTechnique:
    """
    Parse comma-separated technique symbols.

    Raises:
        ValueError: If any symbol is not a known technique
    """
    techniques = NO_TECHNIQUE
    for symbol in text.split(","):
        symbol = symbol.strip()
        if symbol not in _TECHNIQUES_BY_SYMBOL:
            raise ValueError(
                f"Unknown technique '{symbol}'. "
                f"Valid techniques are: {list(_TECHNIQUES_BY_SYMBOL)}"
            )
        techniques |= _TECHNIQUES_BY_SYMBOL[symbol]
    return techniques


def _validate_techniques(value: Any) -> SongNoteTechnique:
    if isinstance(value, SongNoteTechnique):
        return value
    if isinstance(value, str):
        return technique_from_symbols(value)
    raise ValueError(f"Techniques must be technique flags or symbol names. Got: {value!r}")


Techniques = Annotated[SongNoteTechnique, PlainValidator(_validate_techniques)]


# =============================================================================
# BASE MODEL
# =============================================================================

class SongModel(BaseModel):
    """Common configuration for every song document model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# SONG METADATA
# =============================================================================

class StringTuning(SongModel):
    """
    Tuning of a stringed instrument.

    Offsets are semitones from standard tuning, lowest string first. When
    missing (or shorter than four strings) standard tuning is assumed.
    """

    string_semitone_offsets: Optional[List[StrictInt]] = Field(
        default=None, alias="StringSemitoneOffsets"
    )

    def get_tuning(self) -> str:
        """Display name of the tuning, e.g. "Drop D"."""
        return tuning_rules.get_tuning_name(self.string_semitone_offsets)

    def get_tuning_as_notes(self) -> str:
        return tuning_rules.get_tuning_as_notes(self.string_semitone_offsets or [])

    def is_offset_from_standard(self) -> bool:
        return tuning_rules.is_offset_from_standard(self.string_semitone_offsets or [])

    def __str__(self) -> str:
        return self.get_tuning()


class SongInstrumentPart(SongModel):
    """
    Instrument part metadata.

    `instrument_name` is the key that ties a part to its notes document.
    """

    instrument_name: Optional[StrictStr] = Field(default=None, alias="InstrumentName")
    instrument_type: SongInstrumentType = always_emit(
        "InstrumentType", default=SongInstrumentType.LEAD_GUITAR
    )
    tuning: Optional[StringTuning] = Field(default=None, alias="Tuning")
    capo_fret: StrictInt = Field(default=0, ge=0, alias="CapoFret")

    @property
    def display_name(self) -> str:
        if self.tuning is None:
            return self.instrument_name or ""
        label = self.tuning.get_tuning()
        if self.capo_fret > 0:
            label += f" C{self.capo_fret}"
        return f"{self.instrument_name or ''} ({label})"

    def __str__(self) -> str:
        return self.display_name


class SongData(SongModel):
    """Top level song metadata."""

    song_name: Optional[StrictStr] = Field(default=None, alias="SongName")
    artist_name: Optional[StrictStr] = Field(default=None, alias="ArtistName")
    album_name: Optional[StrictStr] = Field(default=None, alias="AlbumName")
    a440_cents_offset: StrictFloat = Field(default=0.0, alias="A440CentsOffset")
    instrument_parts: List[SongInstrumentPart] = Field(
        default_factory=list, alias="InstrumentParts"
    )

    def get_part(self, instrument_name: str) -> Optional[SongInstrumentPart]:
        """Get the first part with the given instrument name, if any."""
        for part in self.instrument_parts:
            if part.instrument_name == instrument_name:
                return part
        return None

    def add_or_replace_part(self, part: SongInstrumentPart) -> None:
        """Add a part, removing any existing part with the same name first."""
        self.instrument_parts = [
            p for p in self.instrument_parts if p.instrument_name != part.instrument_name
        ]
        self.instrument_parts.append(part)

    def __str__(self) -> str:
        return f"{self.artist_name or ''} - {self.song_name or ''}"


# =============================================================================
# SONG STRUCTURE
# =============================================================================

class SongSection(SongModel):
    """Song section (ie: "verse", "chorus"). Times are in seconds."""

    name: Optional[StrictStr] = Field(default=None, alias="Name")
    start_time: StrictFloat = Field(default=0.0, alias="StartTime")
    end_time: StrictFloat = Field(default=0.0, alias="EndTime")

    @model_validator(mode="after")
    def validate_times(self) -> "SongSection":
        """Ensure the section does not end before it starts"""
        if self.end_time < self.start_time:
            raise ValueError(
                f"Section end time must not be before its start time. "
                f"Got: {self.start_time}-{self.end_time}"
            )
        return self

    def __str__(self) -> str:
        return f"{self.name or ''}[{self.start_time}-{self.end_time}]"


class SongBeat(SongModel):
    """An individual beat in a song."""

    time_offset: StrictFloat = always_emit("TimeOffset")
    is_measure: StrictBool = Field(default=False, alias="IsMeasure")


class SongStructure(SongModel):
    """Song structure/arrangement information."""

    sections: List[SongSection] = Field(default_factory=list, alias="Sections")
    beats: List[SongBeat] = Field(default_factory=list, alias="Beats")


# =============================================================================
# STRINGED INSTRUMENT NOTES
# =============================================================================

class SongChord(SongModel):
    """Chord notes/fingering, one entry per string."""

    name: Optional[StrictStr] = Field(default=None, alias="Name")
    fingers: List[StrictInt] = Field(default_factory=list, alias="Fingers")
    frets: List[StrictInt] = Field(default_factory=list, alias="Frets")


class CentsOffset(SongModel):
    """A point on a bend curve."""

    time_offset: StrictFloat = always_emit("TimeOffset")
    # Amount of the bend, in cents (100th of a semitone)
    cents: StrictInt = sentinel("Cents", default=0)


class SongNote(SongModel):
    """
    An individual note/chord event in a song.

    Attributes:
        time_offset: Start of the note in seconds
        time_length: Sustain length in seconds
        fret: 0 is an open string, -1 is unfretted
        string: Zero-based string index, -1 if unset
        cents_offsets: Bend curve, if any
        techniques: Technique flags
        hand_fret: Bottom fret of the hand position
        slide_fret: Fret the note slides to over its sustain
        chord_id: Index into the chord list for the notes of a chord
        finger_id: Index into the chord list for the fingering
    """

    time_offset: StrictFloat = always_emit("TimeOffset")
    time_length: StrictFloat = Field(default=0.0, alias="TimeLength")
    fret: StrictInt = sentinel("Fret", ge=UNSET)
    string: StrictInt = sentinel("String", ge=UNSET)
    cents_offsets: Optional[List[CentsOffset]] = Field(default=None, alias="CentsOffsets")
    techniques: Techniques = Field(default=NO_TECHNIQUE, alias="Techniques")
    hand_fret: StrictInt = sentinel("HandFret", ge=UNSET)
    slide_fret: StrictInt = sentinel("SlideFret", ge=UNSET)
    chord_id: StrictInt = sentinel("ChordID", ge=UNSET)
    finger_id: StrictInt = sentinel("FingerID", ge=UNSET)


class SongInstrumentNotes(SongModel):
    """Notes and chords for a stringed instrument part."""

    sections: List[SongSection] = Field(default_factory=list, alias="Sections")
    chords: List[SongChord] = Field(default_factory=list, alias="Chords")
    notes: List[SongNote] = Field(default_factory=list, alias="Notes")


# =============================================================================
# KEYS
# =============================================================================

class SongKeyboardNote(SongModel):
    time_offset: StrictFloat = always_emit("TimeOffset")
    time_length: StrictFloat = Field(default=0.0, alias="TimeLength")
    note: StrictInt = sentinel("Note", default=0)
    velocity: StrictInt = sentinel("Velocity", default=0)


class SongKeyboardNotes(SongModel):
    """Notes for a keys part."""

    sections: List[SongSection] = Field(default_factory=list, alias="Sections")
    notes: List[SongKeyboardNote] = Field(default_factory=list, alias="Notes")


# =============================================================================
# DRUMS
# =============================================================================

class SongDrumNote(SongModel):
    time_offset: StrictFloat = always_emit("TimeOffset")
    kit_piece: DrumKitPiece = Field(default=DrumKitPiece.NONE, alias="KitPiece")
    articulation: DrumArticulation = Field(default=DrumArticulation.NONE, alias="Articulation")

    @property
    def kit_piece_type(self) -> DrumKitPieceType:
        return get_kit_piece_type(self.kit_piece)

    @property
    def effective_articulation(self) -> DrumArticulation:
        """The articulation, or the kit piece's default when unset."""
        if self.articulation == DrumArticulation.NONE:
            return get_default_articulation(self.kit_piece)
        return self.articulation


class SongDrumNotes(SongModel):
    sections: List[SongSection] = Field(default_factory=list, alias="Sections")
    notes: List[SongDrumNote] = Field(default_factory=list, alias="Notes")


# =============================================================================
# VOCALS
# =============================================================================

class SongVocal(SongModel):
    """A lyric event in a song."""

    vocal: Optional[StrictStr] = Field(default=None, alias="Vocal")
    time_offset: StrictFloat = always_emit("TimeOffset")
