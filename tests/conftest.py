#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any, Iterator

import pytest

from tokgen.crypto import rng

# deterministic byte sequence used across the generator tests
FIXED_BYTES = bytes([0, 1, 2, 3, 4, 5, 6, 7])


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def fixed_bytes() -> bytes:
    """Get the fixed random byte sequence.

    :return: Bytes 0 to 7.
    """
    return FIXED_BYTES


@pytest.fixture
def rng_executor() -> Iterator[None]:
    """Provide a fresh worker pool and wait for pending deliveries afterwards."""
    rng.shutdown_executor()
    yield
    rng.shutdown_executor(wait=True)
