"""Errors raised by the glyph model.

All of these are precondition violations: the host UI let the user reach an
operation that is invalid for the current store contents. They are raised
immediately and never retried or silently resolved.
"""


class GlyphStoreError(Exception):
    """Base class for glyph store precondition failures."""


class DuplicateGlyph(GlyphStoreError, ValueError):
    """Raised when adding a code point that already has a record."""

    def __init__(self, code_point: int):
        super().__init__(f"Character {code_point} already exists in the font")
        self.code_point = code_point


class GlyphNotFound(GlyphStoreError, KeyError):
    """Raised when deleting or editing a code point that has no record."""

    def __init__(self, code_point: int):
        super().__init__(f"Character {code_point} does not exist in the font")
        self.code_point = code_point

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidCodePoint(GlyphStoreError, ValueError):
    """Raised when a code point <= 0 is used as a glyph identity."""

    def __init__(self, code_point: int):
        super().__init__(f"{code_point} is not a valid character code")
        self.code_point = code_point
