"""
A collection of (fairly basic) linting functions for spotting markup which
will not be rendered the way its author probably intended.

Since malformed markup is silently displayed as plain text, mistakes such as
a missing closing ``**`` or a link to an unsupported URL scheme are easy to
miss. The following function will lint a piece of formatted text:

.. autofunction:: check

Linting errors are described by :py:class:`Lint` objects:

.. autoclass:: Lint
    :members:
    :undoc-members:

Different categories of linting errors are identified by members of the
following enumeration. Further details, however, are only given as
human-readable strings.

.. autoclass:: LintKind
    :members:
    :undoc-members:

"""

from typing import Iterable, Tuple

import re

from dataclasses import dataclass

from enum import Enum, auto

from peggie.error_message_generation import offset_to_line_and_column

from formatted_text.tokens import MarkupKind, MarkupToken

from formatted_text.inline import parse_line


class LintKind(Enum):
    """Kinds of lint."""

    unmatched_delimiter = auto()
    empty_markup = auto()
    unsupported_link_scheme = auto()
    nested_markup = auto()


@dataclass(frozen=True)
class Lint:
    """
    A description a piece of lint found in some formatted text.
    """

    kind: LintKind
    description: str

    line: int
    """Line number (starting from 1) at which the problem was found."""

    column: int
    """Column number (starting from 1) at which the problem was found."""


# Matches leftover delimiters in plain text. Empty pairs are tried first so
# that they are not reported twice.
delimiter_pattern = re.compile(r"(?P<empty>~~~~|``)|(?P<delimiter>\*\*|\*|~~|`)")

# Matches link syntax regardless of the target's URL scheme.
any_link_pattern = re.compile(r"\[(?P<label>[^\]]+)\]\((?P<target>[^\s)]+)\)")


def iter_tokens(text: str) -> Iterable[Tuple[int, MarkupToken]]:
    """
    Iterate over every token in the text, yielding (offset, token) pairs
    where the offset is relative to the start of the whole text.
    """
    line_offset = 0
    for line in text.split("\n"):
        for token in parse_line(line):
            yield (line_offset + token.offset, token)
        line_offset += len(line) + 1


def make_lint(text: str, offset: int, kind: LintKind, description: str) -> Lint:
    line, column = offset_to_line_and_column(text, offset)
    return Lint(kind=kind, description=description, line=line, column=column)


def check_for_empty_markup(text: str) -> Iterable[Lint]:
    """
    Check for delimiter pairs with nothing between them, for example::

        Serve with ~~~~ rice.

    These are shown literally since markup must contain at least one
    character.
    """
    for offset, token in iter_tokens(text):
        if not token.is_plain_text:
            continue
        for match in delimiter_pattern.finditer(token.content):
            if match["empty"] is not None:
                yield make_lint(
                    text,
                    offset + match.start(),
                    LintKind.empty_markup,
                    f"Empty markup '{match['empty']}' will be shown literally.",
                )


def check_for_unmatched_delimiters(text: str) -> Iterable[Lint]:
    """
    Check for markup delimiters with no matching closing delimiter, for
    example::

        Add the **smoked paprika and stir.
    """
    for offset, token in iter_tokens(text):
        if not token.is_plain_text:
            continue
        for match in delimiter_pattern.finditer(token.content):
            if match["delimiter"] is not None:
                yield make_lint(
                    text,
                    offset + match.start(),
                    LintKind.unmatched_delimiter,
                    f"Delimiter '{match['delimiter']}' is never closed "
                    f"and will be shown literally.",
                )


def check_for_unsupported_links(text: str) -> Iterable[Lint]:
    """
    Check for links whose target is not an ``http://`` or ``https://`` URL,
    for example::

        Based on [Nan's recipe](ftp://example.com/nans-recipe.txt)

    Such links are shown as plain text, brackets and all.
    """
    for offset, token in iter_tokens(text):
        if not token.is_plain_text:
            continue
        for match in any_link_pattern.finditer(token.content):
            yield make_lint(
                text,
                offset + match.start(),
                LintKind.unsupported_link_scheme,
                f"Link to '{match['target']}' will be shown as plain text "
                f"(only http:// and https:// links are supported).",
            )


def check_for_nested_markup(text: str) -> Iterable[Lint]:
    """
    Check for markup within other markup, for example::

        **Don't *ever* stir the risotto**

    Markup does not nest: the inner delimiters will be shown literally. Inline
    code is exempt since it is expected to contain symbols.
    """
    for offset, token in iter_tokens(text):
        if token.is_plain_text or token.kind == MarkupKind.inline_code:
            continue
        if any(not inner.is_plain_text for inner in parse_line(token.content)):
            kind_name = token.kind.name.replace("_", " ")
            yield make_lint(
                text,
                offset,
                LintKind.nested_markup,
                f"Markup inside {kind_name} text is not supported "
                f"and will be shown literally.",
            )


def check(text: str) -> Iterable[Lint]:
    """
    Run all linting checks against a given piece of formatted text, yielding
    lint in the order it appears in the text.
    """
    all_lint = [
        *check_for_empty_markup(text),
        *check_for_unmatched_delimiters(text),
        *check_for_unsupported_links(text),
        *check_for_nested_markup(text),
    ]
    yield from sorted(all_lint, key=lambda lint: (lint.line, lint.column))
