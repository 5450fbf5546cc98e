#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen exception classes.

All errors raised by the library derive from :class:`TokgenError`. Leaf classes
also inherit from the matching built-in exception, so callers may catch either
``TokgenTypeError`` or plain ``TypeError``.

Failures of the random source are not wrapped; they reach the caller as raised
by the platform.
"""

from typing import Optional


class TokgenError(Exception):
    """tokgen Base Exception.

    :cvar fmt: Default error message format template.
    """

    fmt = "tokgen: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base tokgen Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class TokgenValueError(TokgenError, ValueError):
    """tokgen standard value error.

    Raised for values of the right type but out of the accepted domain, like a
    negative token length or a range expression denoting no characters.
    """


class TokgenTypeError(TokgenError, TypeError):
    """tokgen standard type error.

    Raised for malformed arguments: non-string alphabet expression, non-integer
    length or a completion callback that is not callable.
    """
