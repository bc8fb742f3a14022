"""
Contrast component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContrastCheck:
    """Measured contrast of a text color against its surface."""

    foreground: str
    background: str
    ratio: float
    threshold: float
    is_large_text: bool = False

    @property
    def passes(self) -> bool:
        return self.ratio >= self.threshold

    @property
    def shortfall(self) -> float:
        """How far the ratio falls below the threshold; 0 when it passes."""
        return max(self.threshold - self.ratio, 0.0)
