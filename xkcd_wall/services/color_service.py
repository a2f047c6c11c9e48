import string

from ..errors import InvalidColorFormat
from ..models.color import Color

_HEX_DIGITS = set(string.hexdigits)


class ColorService:
    """Parses user-supplied hex triplets into Color objects."""

    @staticmethod
    def parse_hex(text: str) -> Color:
        """
        Parse "#rrggbb" or "rrggbb" (any case) into an opaque Color.

        Raises:
            InvalidColorFormat: wrong length after dropping one leading '#',
                or any character that is not a hex digit.
        """
        if not isinstance(text, str):
            raise InvalidColorFormat(f"invalid color: {text!r}")
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise InvalidColorFormat(f"invalid color: {digits}")
        if not set(digits) <= _HEX_DIGITS:
            raise InvalidColorFormat(f"invalid color: {digits}")

        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return Color(r, g, b)
