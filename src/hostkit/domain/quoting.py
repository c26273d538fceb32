"""POSIX shell quoting for single arguments.

Unlike :func:`shlex.quote`, every argument is quoted, including ones that
need no quoting, so output is stable regardless of content.

INVARIANT: A POSIX shell reading ``escape_arg(s)`` as one word expands it
to exactly ``s``.
"""

from __future__ import annotations

from collections.abc import Iterable

# Close the quoted run, emit an escaped quote, reopen.
_QUOTE_ESCAPE = "'\\''"


def escape_arg(arg: str) -> str:
    """Quote *arg* for use as a single POSIX shell word.

    >>> escape_arg("abc'abc")
    "'abc'\\\\''abc'"
    >>> escape_arg("")
    "''"
    """
    return "'" + arg.replace("'", _QUOTE_ESCAPE) + "'"


def join_args(args: Iterable[str]) -> str:
    """Build a command line a POSIX shell splits back into *args*."""
    return " ".join(escape_arg(arg) for arg in args)
