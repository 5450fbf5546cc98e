#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen configuration management.

Token generators may be described by YAML or JSON files. This module provides
the dictionary based configuration object used to load and validate them.
"""

import logging
import os
from typing import Any

from typing_extensions import Self

from tokgen.utils.misc import load_configuration
from tokgen.utils.schema_validator import check_config

logger = logging.getLogger(__name__)


class Config(dict):
    """tokgen Configuration."""

    @classmethod
    def create_from_file(cls, file_path: str) -> Self:
        """Create configuration object from file.

        :param file_path: Path to the configuration file to load.
        :raises TokgenError: The file cannot be loaded or parsed.
        :return: Configuration object with loaded data.
        """
        cfg_abs_path = os.path.abspath(file_path)
        cfg = cls(load_configuration(cfg_abs_path))
        logger.debug(f"Configuration loaded from {cfg_abs_path}")
        return cfg

    def check(self, schemas: list[dict[str, Any]]) -> None:
        """Check configuration against validation schemas.

        :param schemas: List of validation schemas.
        :raises TokgenError: The configuration doesn't match the schemas.
        """
        check_config(self, schemas)
