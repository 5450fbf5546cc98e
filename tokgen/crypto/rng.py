#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""tokgen cryptographic random byte source.

This module wraps Python's secrets module and offers the random bytes in two
forms: a blocking call returning the bytes, and a callback-style call that
fetches the bytes on a worker thread and reports ``(error, buffer)`` exactly
once.
"""

# Used security modules


import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from secrets import token_bytes
from typing import Callable, Optional

logger = logging.getLogger(__name__)

RandomBytesCallback = Callable[[Optional[BaseException], Optional[bytes]], None]

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    :param length: The number of random bytes to generate.
    :raises ValueError: If length is negative.
    :return: Cryptographically secure random bytes of specified length.
    """
    return token_bytes(length)


def _get_executor() -> ThreadPoolExecutor:
    """Get the shared worker pool, creating it on first use.

    Must be called with ``_executor_lock`` held.

    :return: Thread pool used for asynchronous random byte requests.
    """
    global _executor  # pylint: disable=global-statement
    if _executor is None:
        _executor = ThreadPoolExecutor(thread_name_prefix="tokgen-rng")
    return _executor


def shutdown_executor(wait: bool = True) -> None:
    """Shut down the shared worker pool.

    A new pool is created by the next asynchronous request.

    :param wait: Block until pending requests are delivered.
    """
    global _executor  # pylint: disable=global-statement
    with _executor_lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait)


def _invoke(
    callback: RandomBytesCallback, error: Optional[BaseException], buffer: Optional[bytes]
) -> None:
    try:
        callback(error, buffer)
    except Exception:  # pylint: disable=broad-except
        # delivered on a worker thread, no caller to raise to
        logger.exception("Random bytes callback raised an exception")


def _deliver(length: int, callback: RandomBytesCallback, released: threading.Event) -> None:
    """Fetch the bytes and report the outcome to the callback.

    :param length: The number of random bytes to generate.
    :param callback: Completion callback receiving ``(error, buffer)``.
    :param released: Event set once the request has been submitted.
    """
    released.wait()
    try:
        buffer = random_bytes(length)
    except Exception as exc:  # pylint: disable=broad-except
        _invoke(callback, exc, None)
        return
    _invoke(callback, None, buffer)


def random_bytes_async(length: int, callback: RandomBytesCallback) -> None:
    """Generate cryptographically secure random bytes on a worker thread.

    The call returns immediately. The callback is invoked exactly once from a worker
    thread, never inline within this call:

    - ``callback(None, buffer)`` on success,
    - ``callback(error, None)`` when the random source fails.

    :param length: The number of random bytes to generate.
    :param callback: Completion callback receiving ``(error, buffer)``.
    """
    released = threading.Event()
    with _executor_lock:
        _get_executor().submit(_deliver, length, callback, released)
    logger.debug(f"Requested {length} random bytes asynchronously")
    released.set()
