#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Character range expression expansion.

A range expression is a compact description of an ordered character sequence.
It is scanned from left to right:

- ``X-Y`` denotes all characters from ``X`` to ``Y`` inclusive, running downward
  when ``Y`` precedes ``X`` (``"c-a"`` gives ``c``, ``b``, ``a``),
- a hyphen that cannot join two characters is taken literally,
- a backslash escapes the following character, an escaped hyphen never opens a range,
- duplicates are preserved.

Examples::

    >>> expand_string("a-f")
    ['a', 'b', 'c', 'd', 'e', 'f']
    >>> expand_string_to_str("0-3XYZ-")
    '0123XYZ-'
"""

import logging
from typing import Iterator

from tokgen.exceptions import TokgenTypeError, TokgenValueError

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = "-"
ESCAPE = "\\"


def _tokenize(expression: str) -> Iterator[tuple[str, bool]]:
    """Split the expression into characters, marking the escaped ones.

    :param expression: Range expression.
    :raises TokgenValueError: The expression ends with an unfinished escape.
    :return: Iterator of (character, escaped) pairs.
    """
    chars = iter(expression)
    for char in chars:
        if char != ESCAPE:
            yield char, False
            continue
        escaped = next(chars, None)
        if escaped is None:
            raise TokgenValueError(f"Dangling escape at the end of expression '{expression}'")
        yield escaped, True


def _char_range(start: str, end: str) -> list[str]:
    step = 1 if ord(end) >= ord(start) else -1
    return [chr(code) for code in range(ord(start), ord(end) + step, step)]


def expand_string(expression: str) -> list[str]:
    """Expand range expression into the explicit list of characters.

    :param expression: Range expression, for instance ``"0-9a-zA-Z"``.
    :raises TokgenTypeError: The expression is not a string.
    :raises TokgenValueError: The expression is malformed.
    :return: Ordered list of the characters denoted by the expression.
    """
    if not isinstance(expression, str):
        raise TokgenTypeError(f"Range expression must be a string, not {type(expression)}")

    tokens = list(_tokenize(expression))
    result: list[str] = []
    index = 0
    while index < len(tokens):
        char, _ = tokens[index]
        if index + 2 < len(tokens):
            separator, escaped = tokens[index + 1]
            if separator == RANGE_SEPARATOR and not escaped:
                result.extend(_char_range(char, tokens[index + 2][0]))
                index += 3
                continue
        result.append(char)
        index += 1

    logger.debug(f"Expression '{expression}' expanded into {len(result)} characters")
    return result


def expand_string_to_str(expression: str) -> str:
    """Expand range expression into a string.

    :param expression: Range expression, for instance ``"a-f"``.
    :return: All characters denoted by the expression joined in order.
    """
    return "".join(expand_string(expression))
