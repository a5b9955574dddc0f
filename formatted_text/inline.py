"""
A single-pass tokenizer for the inline markup syntax.

Each line is scanned left to right. At every step the earliest position in
the remainder of the line at which any of the patterns below matches is
found and the text before it is emitted as plain text. When several patterns
match at the same position the one listed first wins (e.g. ``**`` must be
tried before ``*``, otherwise ``**bold**`` would be read as two italic
spans).

========================= ========================== =====================
Syntax                    Example                    Kind
========================= ========================== =====================
Link                      ``[label](https://...)``   ``link``
Bold                      ``**text**``               ``bold``
Italic                    ``*text*``                 ``italic``
Strikethrough             ``~~text~~``               ``strikethrough``
Inline code               `` `text` ``               ``inline_code``
========================= ========================== =====================

Only ``http://`` and ``https://`` link targets are recognised. Emphasis
matches are non-greedy and the text between delimiters must be at least one
character long. The text inside a matched span is used verbatim: it is not
scanned again for further markup.

.. autofunction:: parse

.. autofunction:: parse_line

.. autofunction:: to_plain_text

"""

from typing import Optional, List, Tuple, Match, Pattern, MutableMapping

import re

from formatted_text.tokens import MarkupKind, MarkupToken


__all__ = [
    "PATTERNS",
    "parse",
    "parse_line",
    "to_plain_text",
]


PATTERNS: List[Tuple[MarkupKind, Pattern[str]]] = [
    (
        MarkupKind.link,
        re.compile(r"\[(?P<content>[^\]]+)\]\((?P<target>https?://[^\s)]+)\)"),
    ),
    (MarkupKind.bold, re.compile(r"\*\*(?P<content>[^\r\u2028\u2029]+?)\*\*")),
    (MarkupKind.italic, re.compile(r"\*(?P<content>[^\r\u2028\u2029]+?)\*")),
    (
        MarkupKind.strikethrough,
        re.compile(r"~~(?P<content>[^\r\u2028\u2029]+?)~~"),
    ),
    (MarkupKind.inline_code, re.compile(r"`(?P<content>[^`]+)`")),
]
"""
The markup patterns in order of precedence. Each has a ``content`` group and
the link pattern additionally a ``target`` group. Emphasis content excludes
the same line terminators as a JavaScript ``.`` would (``\\n`` never occurs
within a line).
"""


def find_earliest_match(
    line: str,
    pos: int = 0,
    cache: Optional[MutableMapping[MarkupKind, Optional[Match[str]]]] = None,
) -> Optional[Tuple[MarkupKind, Match[str]]]:
    """
    Find the pattern which matches earliest in ``line`` at or after ``pos``.
    Returns None when nothing matches.

    When scanning a line with increasing values of ``pos``, a ``cache``
    mapping may be passed in to hold the last match found for each pattern.
    A cached match starting at or after ``pos`` is still the earliest for
    that pattern and so need not be searched for again.
    """
    earliest: Optional[Tuple[MarkupKind, Match[str]]] = None
    for kind, pattern in PATTERNS:
        if cache is not None and kind in cache:
            match = cache[kind]
            if match is not None and match.start() < pos:
                match = cache[kind] = pattern.search(line, pos)
        else:
            match = pattern.search(line, pos)
            if cache is not None:
                cache[kind] = match
        # NB: strictly less than so that earlier patterns win ties
        if match is not None and (
            earliest is None or match.start() < earliest[1].start()
        ):
            earliest = (kind, match)
    return earliest


def parse_line(line: str) -> List[MarkupToken]:
    """
    Split a single line (which must not contain newlines) into a sequence of
    :py:class:`~formatted_text.tokens.MarkupToken`.

    The result always contains at least one token: an empty line produces a
    single empty plain text token.
    """
    tokens: List[MarkupToken] = []
    pos = 0
    key = 0
    cache: MutableMapping[MarkupKind, Optional[Match[str]]] = {}

    while True:
        found = find_earliest_match(line, pos, cache)
        if found is None:
            if pos < len(line) or not tokens:
                tokens.append(
                    MarkupToken(MarkupKind.plain_text, line[pos:], offset=pos)
                )
            return tokens

        kind, match = found
        if match.start() > pos:
            tokens.append(
                MarkupToken(
                    MarkupKind.plain_text, line[pos : match.start()], offset=pos
                )
            )

        tokens.append(
            MarkupToken(
                kind,
                match["content"],
                target=match["target"] if kind == MarkupKind.link else None,
                key=key,
                offset=match.start(),
            )
        )
        key += 1
        pos = match.end()


def parse(text: Optional[str]) -> List[List[MarkupToken]]:
    """
    Parse a (possibly multi-line) string into a list of token lists, one per
    line. Empty lines are preserved. Returns an empty list when ``text`` is
    empty or None.
    """
    if not text:
        return []
    return [parse_line(line) for line in text.split("\n")]


def to_plain_text(text: Optional[str]) -> str:
    """
    Return the text as it would be displayed, with all markup delimiters
    removed and links replaced by their labels.

        >>> to_plain_text("**Very** hot [chillies](https://example.com/)")
        'Very hot chillies'
    """
    return "\n".join(
        "".join(token.content for token in tokens) for tokens in parse(text)
    )
