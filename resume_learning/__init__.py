"""Resume Learning API: chapters with video + quiz, and resumable per-user progress."""

__version__ = "0.1.0"
