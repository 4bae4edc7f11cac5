"""
Drum Kit Definitions

Enumerations for drum parts and the fixed lookups between them:
    - DrumKitPiece: a specific component of the kit (Crash2, Tom3, ...)
    - DrumKitPieceType: the coarse category of a kit piece (Crash, Tom, ...)
    - DrumArticulation: how the piece is struck

Every kit piece maps to exactly one kit-piece type, and every kit-piece
type has exactly one default articulation. The default is what a player
should use when a drum note leaves its articulation unset.

Example:
    >>> get_kit_piece_type(DrumKitPiece.CRASH2)
    <DrumKitPieceType.CRASH: 'Crash'>
    >>> get_default_articulation(DrumKitPiece.HI_HAT)
    <DrumArticulation.HI_HAT_CLOSED: 'HiHatClosed'>
"""

from enum import Enum
from typing import Dict, Union


# =============================================================================
# ENUMERATIONS (values are the symbols written to song documents)
# =============================================================================

class DrumKitPieceType(str, Enum):
    """Coarse drum kit category."""
    NONE = "None"
    KICK = "Kick"
    SNARE = "Snare"
    HI_HAT = "HiHat"
    CRASH = "Crash"
    RIDE = "Ride"
    TOM = "Tom"
    FLEXI = "Flexi"


class DrumKitPiece(str, Enum):
    """An individual piece of the drum kit."""
    NONE = "None"
    KICK = "Kick"
    SNARE = "Snare"
    HI_HAT = "HiHat"
    CRASH = "Crash"
    CRASH2 = "Crash2"
    CRASH3 = "Crash3"
    RIDE = "Ride"
    RIDE2 = "Ride2"
    TOM1 = "Tom1"
    TOM2 = "Tom2"
    TOM3 = "Tom3"
    TOM4 = "Tom4"
    TOM5 = "Tom5"
    FLEXI1 = "Flexi1"
    FLEXI2 = "Flexi2"
    FLEXI3 = "Flexi3"
    FLEXI4 = "Flexi4"


class DrumArticulation(str, Enum):
    """Playing technique applied to a kit piece."""
    NONE = "None"
    DRUM_HEAD = "DrumHead"
    DRUM_HEAD_EDGE = "DrumHeadEdge"
    DRUM_RIM = "DrumRim"
    SIDE_STICK = "SideStick"
    HI_HAT_CLOSED = "HiHatClosed"
    HI_HAT_OPEN = "HiHatOpen"
    HI_HAT_CHICK = "HiHatChick"
    HI_HAT_SPLASH = "HiHatSplash"
    CYMBAL_EDGE = "CymbalEdge"
    CYMBAL_BOW = "CymbalBow"
    CYMBAL_BELL = "CymbalBell"
    CYMBAL_CHOKE = "CymbalChoke"
    FLEXI_A = "FlexiA"
    FLEXI_B = "FlexiB"
    FLEXI_C = "FlexiC"


# =============================================================================
# LOOKUP TABLES
# =============================================================================

KIT_PIECE_TYPES: Dict[DrumKitPiece, DrumKitPieceType] = {
    DrumKitPiece.NONE: DrumKitPieceType.NONE,
    DrumKitPiece.KICK: DrumKitPieceType.KICK,
    DrumKitPiece.SNARE: DrumKitPieceType.SNARE,
    DrumKitPiece.HI_HAT: DrumKitPieceType.HI_HAT,
    DrumKitPiece.CRASH: DrumKitPieceType.CRASH,
    DrumKitPiece.CRASH2: DrumKitPieceType.CRASH,
    DrumKitPiece.CRASH3: DrumKitPieceType.CRASH,
    DrumKitPiece.RIDE: DrumKitPieceType.RIDE,
    DrumKitPiece.RIDE2: DrumKitPieceType.RIDE,
    DrumKitPiece.TOM1: DrumKitPieceType.TOM,
    DrumKitPiece.TOM2: DrumKitPieceType.TOM,
    DrumKitPiece.TOM3: DrumKitPieceType.TOM,
    DrumKitPiece.TOM4: DrumKitPieceType.TOM,
    DrumKitPiece.TOM5: DrumKitPieceType.TOM,
    DrumKitPiece.FLEXI1: DrumKitPieceType.FLEXI,
    DrumKitPiece.FLEXI2: DrumKitPieceType.FLEXI,
    DrumKitPiece.FLEXI3: DrumKitPieceType.FLEXI,
    DrumKitPiece.FLEXI4: DrumKitPieceType.FLEXI,
}

DEFAULT_ARTICULATIONS: Dict[DrumKitPieceType, DrumArticulation] = {
    DrumKitPieceType.NONE: DrumArticulation.NONE,
    DrumKitPieceType.KICK: DrumArticulation.DRUM_HEAD,
    DrumKitPieceType.SNARE: DrumArticulation.DRUM_HEAD,
    DrumKitPieceType.HI_HAT: DrumArticulation.HI_HAT_CLOSED,
    DrumKitPieceType.CRASH: DrumArticulation.CYMBAL_EDGE,
    DrumKitPieceType.RIDE: DrumArticulation.CYMBAL_BOW,
    DrumKitPieceType.TOM: DrumArticulation.DRUM_HEAD,
    DrumKitPieceType.FLEXI: DrumArticulation.FLEXI_A,
}


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def get_kit_piece_type(kit_piece: DrumKitPiece) -> DrumKitPieceType:
    """Get the coarse kit-piece type of a kit piece."""
    return KIT_PIECE_TYPES[DrumKitPiece(kit_piece)]


def get_default_articulation(
    kit_piece: Union[DrumKitPiece, DrumKitPieceType]
) -> DrumArticulation:
    """
    Get the articulation to use when a note does not specify one.

    Accepts either a kit piece or a kit-piece type. Kit pieces are first
    mapped to their type.
    """
    if isinstance(kit_piece, DrumKitPiece):
        kit_piece = get_kit_piece_type(kit_piece)
    return DEFAULT_ARTICULATIONS[DrumKitPieceType(kit_piece)]
