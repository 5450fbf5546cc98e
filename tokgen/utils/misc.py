#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen miscellaneous utilities.

Text and configuration file loading.
"""

import json
import logging
from typing import Any

import yaml

from tokgen.exceptions import TokgenError

logger = logging.getLogger(__name__)


def load_text(path: str) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :return: Content of the text file as string.
    """
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_configuration(path: str) -> dict:
    """Load configuration from YAML or JSON file.

    The file content is parsed as JSON first, YAML is used as a fallback.

    :param path: Path to configuration file.
    :raises TokgenError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path)
    except Exception as exc:
        raise TokgenError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Any = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if config_data is None:
        raise TokgenError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise TokgenError(f"Invalid configuration file: {path}")

    return config_data
