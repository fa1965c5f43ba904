"""shipit: one-shot release automation (tag, notes, GitHub release, tap)."""

__version__ = "0.3.0"
