from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    Opaque 8-bit RGB color.
    Build it through ColorService.parse_hex, not by hand.
    """
    r: int
    g: int
    b: int
    a: int = 255  # always fully opaque

    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def rgba(self) -> Tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_hex(self, uppercase: bool = False) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text.upper() if uppercase else text
