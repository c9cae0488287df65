"""
Document classification values consumed from the parsing front-end.
"""

from enum import Enum


class QuirksMode(Enum):
    """Rendering-compatibility mode computed by the parser, stored as-is."""
    NO_QUIRKS = "no quirks"
    LIMITED_QUIRKS = "limited quirks"
    QUIRKS = "quirks"

    @classmethod
    def from_compat_mode(cls, compat_mode: str) -> 'QuirksMode':
        """
        Map an html5lib `compatMode` string to a QuirksMode.

        Args:
            compat_mode: One of "no quirks", "limited quirks" or "quirks"

        Returns:
            The matching QuirksMode

        Raises:
            ValueError: If the string is not a known compat mode
        """
        return cls(compat_mode)


class DocumentType(Enum):
    HTML = "html"
    IFRAME_SRCDOC = "iframe srcdoc"
