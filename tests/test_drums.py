"""
Tests for songformat/data/drums.py

Run with: pytest tests/test_drums.py -v
"""

import pytest

from songformat.data.drums import (
    DrumArticulation,
    DrumKitPiece,
    DrumKitPieceType,
    get_default_articulation,
    get_kit_piece_type,
)
from songformat.data.schema import SongDrumNote


class TestKitPieceType:

    @pytest.mark.parametrize("kit_piece", list(DrumKitPiece))
    def test_every_kit_piece_has_a_type(self, kit_piece):
        assert isinstance(get_kit_piece_type(kit_piece), DrumKitPieceType)

    def test_grouping(self):
        assert get_kit_piece_type(DrumKitPiece.CRASH3) == DrumKitPieceType.CRASH
        assert get_kit_piece_type(DrumKitPiece.RIDE2) == DrumKitPieceType.RIDE
        assert get_kit_piece_type(DrumKitPiece.TOM5) == DrumKitPieceType.TOM
        assert get_kit_piece_type(DrumKitPiece.FLEXI4) == DrumKitPieceType.FLEXI
        assert get_kit_piece_type(DrumKitPiece.NONE) == DrumKitPieceType.NONE


class TestDefaultArticulation:

    @pytest.mark.parametrize("kit_piece_type", list(DrumKitPieceType))
    def test_every_type_has_a_default(self, kit_piece_type):
        assert isinstance(get_default_articulation(kit_piece_type), DrumArticulation)

    @pytest.mark.parametrize(
        "kit_piece_type, expected",
        [
            (DrumKitPieceType.KICK, DrumArticulation.DRUM_HEAD),
            (DrumKitPieceType.SNARE, DrumArticulation.DRUM_HEAD),
            (DrumKitPieceType.HI_HAT, DrumArticulation.HI_HAT_CLOSED),
            (DrumKitPieceType.CRASH, DrumArticulation.CYMBAL_EDGE),
            (DrumKitPieceType.RIDE, DrumArticulation.CYMBAL_BOW),
            (DrumKitPieceType.TOM, DrumArticulation.DRUM_HEAD),
            (DrumKitPieceType.FLEXI, DrumArticulation.FLEXI_A),
            (DrumKitPieceType.NONE, DrumArticulation.NONE),
        ],
    )
    def test_defaults(self, kit_piece_type, expected):
        assert get_default_articulation(kit_piece_type) == expected

    def test_kit_piece_goes_through_its_type(self):
        assert get_default_articulation(DrumKitPiece.CRASH2) == DrumArticulation.CYMBAL_EDGE


class TestDrumNote:

    def test_unset_articulation_uses_default(self):
        note = SongDrumNote(time_offset=1.0, kit_piece=DrumKitPiece.HI_HAT)
        assert note.kit_piece_type == DrumKitPieceType.HI_HAT
        assert note.effective_articulation == DrumArticulation.HI_HAT_CLOSED

    def test_explicit_articulation_wins(self):
        note = SongDrumNote(
            time_offset=1.0,
            kit_piece=DrumKitPiece.HI_HAT,
            articulation=DrumArticulation.HI_HAT_OPEN,
        )
        assert note.effective_articulation == DrumArticulation.HI_HAT_OPEN
