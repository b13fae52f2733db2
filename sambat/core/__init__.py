"""Core value types for Sambat.

This module provides:
    - NepaliDateTime: Bikram Sambat date with a time of day
"""

from __future__ import annotations

from sambat.core.datetime import NepaliDateTime

__all__: list[str] = [
    "NepaliDateTime",
]
