"""Feature packages of lyricstore."""
