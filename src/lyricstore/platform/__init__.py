"""Platform services shared by lyricstore features."""
