#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen utilities package.

Range expression expansion, configuration loading and validation helpers.
"""

from tokgen.utils.expand import expand_string, expand_string_to_str

__all__ = ["expand_string", "expand_string_to_str"]
