#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen cryptographic helpers.

Thin layer over the platform secure random source.
"""
