"""
hanabi-canvas keeps the artworks and challenge requests of a drawing session
in memory and saves them to JSON documents between sessions.
"""

__all__ = [
    "config",
    "exceptions",
    "likes",
    "persistence",
    "records",
    "store",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
