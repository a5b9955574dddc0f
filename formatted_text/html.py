"""
This module renders formatted text into an HTML fragment:

.. autofunction:: render_formatted_text

The generated fragment is a ``<div>`` containing one run of inline elements
per line of input, separated by ``<br />`` tags. Styled spans carry inline
``style`` attributes so that the fragment displays sensibly without any
stylesheet, along with the following CSS classes which may be used to
override this styling.

CSS Classes
===========

``ft-link``
    Applied to ``<a>`` tags generated for ``[label](url)`` links. Links
    always open in a new browsing context.
``ft-strikethrough``
    Applied to ``<s>`` tags generated for ``~~strikethrough~~`` text.
``ft-code``
    Applied to ``<code>`` tags generated for `` `inline code` ``.

Bold and italic text are rendered as plain ``<strong>`` and ``<em>`` tags.

The inline styles use the CSS custom properties ``--accent`` (link colour)
and ``--accent-light`` (code background) which the embedding page is
expected to define.

Utilities
=========

.. autofunction:: t

.. autofunction:: render_style

.. autofunction:: render_token

.. autofunction:: render_line

"""

from typing import Optional, Mapping

import html

from textwrap import indent

from xml.sax.saxutils import quoteattr

from formatted_text.tokens import MarkupKind, MarkupToken

from formatted_text.inline import parse_line


__all__ = [
    "LINK_STYLE",
    "STRIKETHROUGH_STYLE",
    "INLINE_CODE_STYLE",
    "t",
    "render_style",
    "render_token",
    "render_line",
    "render_formatted_text",
]


LINK_STYLE = {
    "color": "var(--accent)",
    "text-decoration": "underline",
    "text-underline-offset": "2px",
}

STRIKETHROUGH_STYLE = {
    "opacity": "0.6",
}

INLINE_CODE_STYLE = {
    "background": "var(--accent-light)",
    "padding": "0.1rem 0.35rem",
    "border-radius": "4px",
    "font-family": "monospace",
    "font-size": "0.9em",
}


def t(tag: str, body: Optional[str] = None, **attrs: Optional[str]) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("br")
        '<br />'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("span", "Hiya", class_="fancy")
        '<span class="fancy">Hiya</span>'
        >>> t("span", "Bye", data__foo="bar", title=None)
        '<span data-foo="bar">Bye</span>'

    Trailing underscores (``_``) are trimmed from attribute names and double
    underscores (``__``) are replaced with hyphens. Attributes given as None
    are omitted. The body is inserted verbatim and so must already be
    escaped.
    """
    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
        if value is not None
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


def render_style(style: Optional[Mapping[str, str]]) -> Optional[str]:
    """
    Render a mapping from CSS property names to values into a string suitable
    for use as a ``style`` attribute. Returns None if no properties are given.

        >>> render_style({"color": "red", "font-size": "2em"})
        'color: red; font-size: 2em'
    """
    if not style:
        return None
    return "; ".join(f"{name}: {value}" for name, value in style.items())


def render_token(token: MarkupToken) -> str:
    content = html.escape(token.content)

    if token.kind == MarkupKind.bold:
        return t("strong", content)
    elif token.kind == MarkupKind.italic:
        return t("em", content)
    elif token.kind == MarkupKind.strikethrough:
        return t(
            "s",
            content,
            class_="ft-strikethrough",
            style=render_style(STRIKETHROUGH_STYLE),
        )
    elif token.kind == MarkupKind.inline_code:
        return t(
            "code", content, class_="ft-code", style=render_style(INLINE_CODE_STYLE),
        )
    elif token.kind == MarkupKind.link:
        return t(
            "a",
            content,
            href=token.target,
            target="_blank",
            rel="noopener noreferrer",
            class_="ft-link",
            style=render_style(LINK_STYLE),
        )
    else:
        return content


def render_line(line: str) -> str:
    return "".join(render_token(token) for token in parse_line(line))


def render_formatted_text(
    text: Optional[str],
    class_: Optional[str] = None,
    style: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Render formatted text into an HTML ``<div>``.

    Parameters
    ==========
    text : str or None
        The text to render. Lines are separated by ``\\n`` and rendered with
        a ``<br />`` between each (but not after the last).
    class_ : str, optional
        CSS class name(s) to give the containing ``<div>``.
    style : {property: value, ...}, optional
        CSS properties to apply to the containing ``<div>``, given verbatim.

    Returns
    =======
    str or None
        The rendered HTML or None if ``text`` was empty or None.
    """
    if not text:
        return None

    body = t("br").join(render_line(line) for line in text.split("\n"))
    return t("div", body, class_=class_, style=render_style(style))
