"""
The ``formatted-text`` command renders a file containing formatted text into
HTML.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ formatted-text SOURCE [OUTPUT_FILENAME]

This will render the text in the indicated file (or standard input if ``-``
is given) into an HTML ``<div>``. If no output filename is given the HTML is
written to stdout.

Styling
=======

The ``--class`` (``-c``) argument sets the CSS class of the generated
``<div>`` and ``--style`` (``-s``) adds CSS properties to it. The latter
takes ``PROPERTY:VALUE`` pairs and may be given several times.

Standalone pages
================

With ``--standalone`` (``-S``) a complete HTML page is generated instead of a
fragment, suitable for previewing in a browser.
"""

from typing import Tuple, List, Optional

import sys

import html

from argparse import ArgumentParser, ArgumentTypeError

from pathlib import Path

from formatted_text.html import render_formatted_text


STANDALONE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    :root {{
      --accent: #b5462a;
      --accent-light: #f6e3dc;
    }}
  </style>
</head>
<body>
{body}
</body>
</html>
"""


def css_property(value: str) -> Tuple[str, str]:
    """
    Parse a 'property:value' pair given on the command line.
    """
    name, colon, css_value = value.partition(":")
    if not colon or not name.strip() or not css_value.strip():
        raise ArgumentTypeError(f"expected PROPERTY:VALUE, got '{value}'")
    return (name.strip(), css_value.strip())


def generate_standalone_page(fragment: Optional[str], title: str) -> str:
    return STANDALONE_TEMPLATE.format(title=html.escape(title), body=fragment or "")


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Render a file containing formatted text into HTML.
        """,
    )

    parser.add_argument(
        "source",
        type=str,
        help="""
            The filename of the text file to render, or '-' to read from
            stdin.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML. Defaults to writing to
            stdout.
        """,
    )

    parser.add_argument(
        "--class",
        "-c",
        dest="class_",
        metavar="CLASS",
        default=None,
        help="""
            CSS class name to give the generated <div>.
        """,
    )
    parser.add_argument(
        "--style",
        "-s",
        type=css_property,
        action="append",
        metavar="PROPERTY:VALUE",
        default=[],
        help="""
            A CSS property to apply to the generated <div>. May be given
            multiple times.
        """,
    )
    parser.add_argument(
        "--standalone",
        "-S",
        action="store_true",
        default=False,
        help="""
            Generate a complete HTML page rather than just a fragment.
        """,
    )

    args = parser.parse_args(argv)

    try:
        if args.source == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    html_output = render_formatted_text(
        text, class_=args.class_, style=dict(args.style),
    )
    if args.standalone:
        title = "stdin" if args.source == "-" else Path(args.source).stem
        html_output = generate_standalone_page(html_output, title)
    elif html_output is None:
        html_output = ""
    elif not html_output.endswith("\n"):
        html_output += "\n"

    if args.output is None:
        sys.stdout.write(html_output)
    else:
        try:
            with args.output.open("w", encoding="utf-8") as f:
                f.write(html_output)
        except (OSError, UnicodeEncodeError) as e:
            sys.stderr.write(f"{e}\n")
            sys.exit(1)


if __name__ == "__main__":
    main()
