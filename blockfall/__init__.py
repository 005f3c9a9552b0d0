"""Rules and state for a falling-block puzzle game: shapes, pieces, scoring, sound settings and key bindings."""

__version__ = "0.1.0"