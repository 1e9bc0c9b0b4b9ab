"""lyricstore: local-file lyric source with crash-safe saves."""

__version__ = "0.1.0"
