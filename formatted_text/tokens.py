"""
Data types produced by the inline markup parser.

.. autoclass:: MarkupKind
    :members:
    :undoc-members:

.. autoclass:: MarkupToken
    :members:

"""

from typing import Optional

from dataclasses import dataclass

from enum import Enum, auto


__all__ = ["MarkupKind", "MarkupToken"]


class MarkupKind(Enum):
    """Kinds of span which may appear in a line of formatted text."""

    plain_text = auto()
    bold = auto()
    italic = auto()
    strikethrough = auto()
    inline_code = auto()
    link = auto()


@dataclass(frozen=True)
class MarkupToken:
    """
    A contiguous run of a line of formatted text sharing one visual treatment.
    """

    kind: MarkupKind

    content: str
    """
    The text to be displayed with markup delimiters removed. For links, this
    is the link label.
    """

    target: Optional[str] = None
    """The URL linked to (links only)."""

    key: Optional[int] = None
    """
    A render key, unique within the line, assigned in increasing order to
    every styled (i.e. non :py:attr:`MarkupKind.plain_text`) token. Useful
    to renderers which require a stable identity for each item in a list.
    """

    offset: int = 0
    """
    The offset within the line of the first character of the source of this
    token, including any leading delimiter.
    """

    @property
    def is_plain_text(self) -> bool:
        return self.kind == MarkupKind.plain_text
