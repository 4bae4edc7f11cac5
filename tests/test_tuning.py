"""
Tests for songformat/rules/tuning.py

Run with: pytest tests/test_tuning.py -v
"""

import pytest

from songformat.rules.tuning import (
    get_offset_note_flat,
    get_offset_note_sharp,
    get_tuning_as_notes,
    get_tuning_name,
    is_offset_from_standard,
)


class TestNoteLookup:
    """Test the note tables anchored at E."""

    def test_sharp_names(self):
        assert get_offset_note_sharp(0) == "E"
        assert get_offset_note_sharp(2) == "F#"
        assert get_offset_note_sharp(9) == "C#"
        assert get_offset_note_sharp(12) == "E"
        assert get_offset_note_sharp(-1) == "D#"

    def test_flat_names(self):
        assert get_offset_note_flat(-1) == "Eb"
        assert get_offset_note_flat(-2) == "D"
        assert get_offset_note_flat(-3) == "Db"
        assert get_offset_note_flat(4) == "Ab"

    def test_out_of_range_offsets_have_no_name(self):
        """Only one octave of negative correction is applied."""
        assert get_offset_note_sharp(-12) == "E"
        assert get_offset_note_sharp(-13) is None
        assert get_offset_note_flat(-14) is None


class TestIsOffsetFromStandard:

    def test_uniform_and_drop(self):
        assert is_offset_from_standard([0, 0, 0, 0, 0, 0])
        assert is_offset_from_standard([-2, 0, 0, 0, 0, 0])
        assert is_offset_from_standard([-4, -2, -2, -2, -2, -2])

    def test_retuned_upper_string(self):
        assert not is_offset_from_standard([0, 0, 0, 0, -2, 0])


class TestTuningName:
    """Test the display names of tunings."""

    @pytest.mark.parametrize("offsets", [None, [], [0], [-2, -2, -2]])
    def test_missing_or_short_is_standard(self, offsets):
        assert get_tuning_name(offsets) == "E Std"

    @pytest.mark.parametrize(
        "offsets, expected",
        [
            ([0, 0, 0, 0, 0, 0], "E Std"),
            ([-2, -2, -2, -2, -2, -2], "D Std"),
            ([-1, -1, -1, -1, -1, -1], "Eb Std"),
            ([1, 1, 1, 1, 1, 1], "F Std"),
            ([0, 0, 0, 0], "E Std"),
            ([-2, 0, 0, 0, 0, 0], "Drop D"),
            ([-3, 0, 0, 0, 0, 0], "Drop Db"),
            ([-4, -2, -2, -2, -2, -2], "D Drop C"),
            ([-2, -4, -4, -4, -4, -4], "C Drop D"),
            ([-3, -1, -1, -1, -1, -1], "Eb Drop Db"),
            ([-5, 0, 0, 0], "Drop B"),
        ],
    )
    def test_standard_and_drop_tunings(self, offsets, expected):
        assert get_tuning_name(offsets) == expected

    @pytest.mark.parametrize(
        "offsets, expected",
        [
            ([-2, -2, 0, 0, 0, -2], "Open G"),
            ([-2, 0, 0, -1, -2, -2], "Open D"),
            ([0, 2, 2, 1, 0, 0], "Open E"),
            ([0, 0, 2, 2, 2, 0], "Open A"),
            ([-4, -2, -2, 0, 1, 0], "Open C"),
        ],
    )
    def test_open_tunings(self, offsets, expected):
        assert get_tuning_name(offsets) == expected

    def test_other_tunings_are_spelled_out(self):
        assert get_tuning_name([-2, 0, 0, 0, -2, -2]) == "DADGAD"
        assert get_tuning_name([0, 0, 0, 0, -2, 0]) == "EADGAE"

    def test_unnameable_key_falls_back_to_spelling(self):
        """A key beyond the note tables is spelled per string instead."""
        offsets = [-13, -13, -13, -13, -13, -13]
        assert get_tuning_name(offsets) == get_tuning_as_notes(offsets)
        assert get_tuning_name(offsets) == "G#C#F#A#"

    def test_unnameable_drop_falls_back_to_spelling(self):
        offsets = [-13, 0, 0, 0, 0, 0]
        assert get_tuning_name(offsets) == "ADGBE"


class TestTuningAsNotes:

    def test_standard_spelling(self):
        assert get_tuning_as_notes([0, 0, 0, 0, 0, 0]) == "EADGBE"

    def test_four_string_bass(self):
        assert get_tuning_as_notes([0, 0, 0, 0]) == "EADG"

    def test_strings_past_six_use_e(self):
        assert get_tuning_as_notes([0, 0, 0, 0, 0, 0, 7]) == "EADGBEB"
