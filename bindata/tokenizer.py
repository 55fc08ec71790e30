# bindata/tokenizer.py
"""
bindata — Line Tokenizer
========================

Quote-aware splitting of one CSV line into trimmed tokens.

The scanner is a two-state machine that consumes one character at a time:

- ``unquoted``: a comma ends the current token; a quote switches to ``quoted``.
- ``quoted``  : a comma is literal content; a quote switches back.

Quote characters are never copied into token content. There is no escaped
quote (``""``): each quote simply toggles the state, so ``"a""b"`` reads as
``ab``. An unbalanced quote leaves the machine in ``quoted`` when the line
ends; the last token is flushed anyway and no error is raised.

Public API
----------
- `tokenize_line(line: str) -> list[str]`
- `split_header(line: str) -> list[str]`
"""

from __future__ import annotations

from typing import List

DELIMITER = ","
QUOTE = '"'

UNQUOTED = "unquoted"
QUOTED = "quoted"

_TOGGLE = {UNQUOTED: QUOTED, QUOTED: UNQUOTED}


def tokenize_line(line: str) -> List[str]:
    """
    Split a data line into tokens, honoring double-quoted segments.

    Parameters
    ----------
    line : str
        One line of the input, without its ``\\n`` terminator.

    Returns
    -------
    list[str]
        Tokens with surrounding whitespace removed. A line with N unquoted
        commas always yields N + 1 tokens.

    Examples
    --------
    >>> tokenize_line('123456,"Issuer, With, Commas",CREDIT')
    ['123456', 'Issuer, With, Commas', 'CREDIT']
    >>> tokenize_line('411111,"VISA')
    ['411111', 'VISA']
    """
    tokens: List[str] = []
    current: List[str] = []
    state = UNQUOTED

    for ch in line:
        if ch == QUOTE:
            state = _TOGGLE[state]
        elif ch == DELIMITER and state == UNQUOTED:
            tokens.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    tokens.append("".join(current).strip())
    return tokens


def split_header(line: str) -> List[str]:
    """
    Split the header line into column names.

    Header cells are not quote-aware: the line is split on every comma, then
    each cell is trimmed and every literal quote character is removed.

    >>> split_header('"BIN", "Brand",Type')
    ['BIN', 'Brand', 'Type']
    """
    return [cell.strip().replace(QUOTE, "") for cell in line.split(DELIMITER)]
