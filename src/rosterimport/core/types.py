"""Type aliases used across rosterimport."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
SessionId = str
