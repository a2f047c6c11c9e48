from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Comic:
    """Metadata returned by the xkcd JSON API (only the fields we use)."""
    num: int
    img: str
    title: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "Comic":
        return cls(
            num=int(data.get("num", 0)),
            img=str(data.get("img") or ""),
            title=str(data.get("safe_title") or data.get("title") or ""),
        )
