"""
The ``formatted-text-lint`` command checks files containing formatted text
for markup which will not display as intended, such as unclosed ``**`` or
links to non-HTTP URLs.

Usage::

    $ formatted-text-lint FILENAME [...]

If any potential issues are found, explanations will be printed to stdout and
a non-zero exit status will be returned. Otherwise, no messages will be
produced and the exit status will be 0.

In some cases, warnings may be produced for text which is actually correct
(e.g. an asterisk used as a multiplication sign). If desired, you can
suppress warnings of a specific kind using the ``--ignore`` or ``-i``
argument. Warning types are indicated in square brackets in warning messages.
This argument may be used multiple times to ignore multiple kinds of warning.
"""

from typing import List, Optional

import sys

from argparse import ArgumentParser

from pathlib import Path

from formatted_text.lint import check, LintKind


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Check files containing formatted text for possible mistakes.
        """,
    )

    parser.add_argument(
        "filename",
        type=Path,
        nargs="*",
        help="""
            The filename of the text file to check. Pass multiple filenames to
            check multiple files.
        """,
    )

    parser.add_argument(
        "--ignore",
        "-i",
        action="extend",
        default=[],
        nargs="+",
        choices=[k.name for k in LintKind],
        help="""
            Ignore warnings of a certain types.
        """,
    )

    args = parser.parse_args(argv)

    failed = False
    for filename in args.filename:
        try:
            text = filename.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            failed = True
            print(f"{filename}: Error: {e}")
            continue

        for lint in check(text):
            if lint.kind.name not in args.ignore:
                failed = True
                print(
                    f"{filename}:{lint.line}:{lint.column}: "
                    f"Warning: {lint.description} [{lint.kind.name}]"
                )

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
