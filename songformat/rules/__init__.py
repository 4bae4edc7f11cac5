"""
Rules Subpackage

Derived display values that never go into a song document:
    - tuning.py: Names for string tunings ("E Std", "Drop D", "Open G")
    - filenames.py: Filesystem-safe slugs from titles

Usage:
    from songformat.rules import get_tuning_name, get_safe_filename

    get_tuning_name([-2, 0, 0, 0, 0, 0])  # 'Drop D'
    get_safe_filename("Mötley Crüe")      # 'MotleyCrue'
"""

from songformat.rules.filenames import get_safe_filename, get_song_filename
from songformat.rules.tuning import get_tuning_as_notes, get_tuning_name, is_offset_from_standard
