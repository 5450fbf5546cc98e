#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen schema-based configuration validation.

Configuration dictionaries are validated against a list of JSON schemas which
are merged together before compilation.
"""

import copy
import json
import logging
from typing import Any

import fastjsonschema
from deepmerge import always_merger

from tokgen import TOKGEN_DEBUG
from tokgen.exceptions import TokgenError

logger = logging.getLogger(__name__)


def _print_validation_fail_reason(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Format JSON schema validation failure into human-readable error message.

    :param exc: The JSON schema validation exception to process.
    :return: Formatted error message explaining the validation failure reason.
    """
    message = str(exc)
    if exc.rule == "additionalProperties":
        message += "; Allowed field(s) are listed in the schema 'properties'"
    return message


def check_config(config: dict[str, Any], schemas: list[dict[str, Any]]) -> None:
    """Check the configuration by provided list of validation schemas.

    :param config: Configuration dictionary to validate.
    :param schemas: List of JSON schema dictionaries for validation.
    :raises TokgenError: Invalid validation schema or configuration validation failed.
    """
    config_to_check = copy.deepcopy(dict(config))

    schema: dict[str, Any] = {}
    for sch in schemas:
        always_merger.merge(schema, copy.deepcopy(sch))

    if TOKGEN_DEBUG:
        logger.debug(f"Merged validation schema: {json.dumps(schema, indent=2, default=str)}")
        logger.debug(
            f"Configuration to check: {json.dumps(config_to_check, indent=2, default=str)}"
        )

    try:
        validator = fastjsonschema.compile(schema)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise TokgenError(f"Invalid validation schema to check config: {str(exc)}") from exc
    try:
        validator(config_to_check)
    except fastjsonschema.JsonSchemaValueException as exc:
        raise TokgenError(
            f"Configuration validation failed: {_print_validation_fail_reason(exc)}"
        ) from exc
