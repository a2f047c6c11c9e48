from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Dimension:
    width: int   # > 0
    height: int  # > 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
