"""Release workflow: version resolution, notes, publishing, tap update, verification."""

from __future__ import annotations
