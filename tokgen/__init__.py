#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen - secure random token generator.

Generates random token strings of a configurable length from a configurable
character alphabet. Entropy comes from the platform CSPRNG, the alphabet is
described by a compact range expression such as ``0-9a-zA-Z``.

Typical uses are API keys, session identifiers and one-time codes.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse


def get_tokgen_version() -> Version:
    """Get tokgen version information.

    :return: Parsed version object containing tokgen version information.
    """
    from .__version__ import __version__ as tokgen_version

    return parse(tokgen_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_tokgen_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

# TOKGEN_DEBUG enables verbose dumps of configuration validation
TOKGEN_DEBUG = value_to_bool(os.environ.get("TOKGEN_DEBUG"))
