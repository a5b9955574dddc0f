"""
Formatted text renders short pieces of user supplied text (recipe
descriptions, method steps, comments and so on) containing a small set of
Discord-style inline markup:

.. code:: text

    **bold**, *italic*, ~~strikethrough~~, `code` and [links](https://...)

Markup which does not match is shown as-is; nothing in this package raises
on any input string. Markup does not nest and there is no escaping syntax.

API
===

The two main entry points are:

.. autofunction:: render_formatted_text

.. autofunction:: to_plain_text

Lower level access to the parsed token stream is described in
:py:mod:`formatted_text.inline` and :py:mod:`formatted_text.tokens`.
"""

__version__ = "1.0"

from formatted_text.inline import parse, parse_line, to_plain_text
from formatted_text.html import render_formatted_text
