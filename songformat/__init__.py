"""
SongFormat - Song Chart Data Model and Document Codec

A shared data model for musical performance charts (song metadata,
instrument parts, note/chord/beat/lyric timelines) and the rules for
writing it to and reading it from JSON documents.

Subpackages:
    - songformat.data: Data model, drum lookups, document codec and storage
    - songformat.rules: Tuning names and filename slugs

Example usage:
    from songformat.data import SongData, encode, decode, CONDENSED

    text = encode(song, CONDENSED)
    song = decode(text, SongData)
"""

__version__ = "0.1.0"
