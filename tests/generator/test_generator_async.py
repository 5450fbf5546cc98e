#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Asynchronous token generation tests.

Callback completion on worker threads and the asyncio coroutine built on top of it.
"""

import asyncio
import threading
from typing import Any, Optional
from unittest.mock import patch

import pytest

from tokgen.crypto.rng import shutdown_executor
from tokgen.exceptions import TokgenTypeError, TokgenValueError
from tokgen.generator import TokenGenerator

WAIT_TIMEOUT = 5


class TokenRecorder:
    """Collects invocations of a token completion callback."""

    def __init__(self) -> None:
        self.calls: list[tuple[Optional[BaseException], Optional[str]]] = []
        self.threads: list[threading.Thread] = []
        self.done = threading.Event()

    def __call__(self, error: Optional[BaseException], token: Optional[str]) -> None:
        self.calls.append((error, token))
        self.threads.append(threading.current_thread())
        self.done.set()

    def wait(self) -> None:
        assert self.done.wait(WAIT_TIMEOUT)
        # let any erroneous second delivery happen before assertions
        shutdown_executor(wait=True)


def test_generate_default_length_async(rng_executor: Any, fixed_bytes: bytes) -> None:
    """Test callback passed as the only argument uses the default length."""
    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.token_bytes", return_value=fixed_bytes) as token_bytes:
        assert TokenGenerator(8).generate(recorder) is None
        recorder.wait()

    token_bytes.assert_called_once_with(8)
    assert len(recorder.calls) == 1
    error, token = recorder.calls[0]
    assert error is None
    assert token is not None and len(token) == 8


def test_generate_explicit_length_async(rng_executor: Any, fixed_bytes: bytes) -> None:
    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.token_bytes", return_value=fixed_bytes) as token_bytes:
        assert TokenGenerator("abc").generate(8, recorder) is None
        recorder.wait()

    token_bytes.assert_called_once_with(8)
    assert recorder.calls == [(None, "abaabaab")]


def test_generate_keyword_callback(rng_executor: Any, fixed_bytes: bytes) -> None:
    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.token_bytes", return_value=fixed_bytes):
        TokenGenerator("abc").generate(on_complete=recorder)
        recorder.wait()
    assert recorder.calls == [(None, "abaabaab")]


def test_generate_error_async(rng_executor: Any) -> None:
    """Test that a failure of the random source is delivered once in the error slot."""
    error = OSError("oops")
    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.token_bytes", side_effect=error) as token_bytes:
        TokenGenerator().generate(8, recorder)
        recorder.wait()

    token_bytes.assert_called_once_with(8)
    assert len(recorder.calls) == 1
    assert recorder.calls[0][0] is error
    assert recorder.calls[0][1] is None


def test_generate_callback_runs_on_worker_thread(rng_executor: Any) -> None:
    recorder = TokenRecorder()
    TokenGenerator().generate(4, recorder)
    recorder.wait()
    assert recorder.threads[0] is not threading.current_thread()
    assert recorder.threads[0].name.startswith("tokgen-rng")


def test_generate_callback_not_inline(rng_executor: Any) -> None:
    """Test that the callback is never delivered inline while the random source is busy.

    The initiating call returns without blocking on the random source.
    """
    gate = threading.Event()

    def slow_token_bytes(length: int) -> bytes:
        gate.wait(WAIT_TIMEOUT)
        return bytes(length)

    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.token_bytes", slow_token_bytes):
        assert TokenGenerator().generate(4, recorder) is None
        assert recorder.calls == []
        gate.set()
        recorder.wait()
    assert recorder.calls == [(None, "0000")]


@pytest.mark.parametrize(
    "length,exception",
    [("8", TokgenTypeError), ({}, TokgenTypeError), (-1, TokgenValueError)],
)
def test_generate_invalid_length_async(length: Any, exception: type) -> None:
    """Test that argument errors are raised synchronously even in asynchronous mode."""
    recorder = TokenRecorder()
    with patch("tokgen.crypto.rng.random_bytes_async") as random_bytes_async:
        with pytest.raises(exception):
            TokenGenerator().generate(length, recorder)
    random_bytes_async.assert_not_called()
    assert recorder.calls == []


def test_generate_concurrent_callbacks(rng_executor: Any) -> None:
    recorders = [TokenRecorder() for _ in range(20)]
    generator = TokenGenerator("a-f")
    for length, recorder in enumerate(recorders):
        generator.generate(length, recorder)
    for length, recorder in enumerate(recorders):
        recorder.wait()
        error, token = recorder.calls[0]
        assert error is None
        assert token is not None and len(token) == length
        assert set(token) <= set("abcdef")


def test_generate_async_coroutine(rng_executor: Any, fixed_bytes: bytes) -> None:
    """Test awaiting the token from an event loop."""
    with patch("tokgen.crypto.rng.token_bytes", return_value=fixed_bytes) as token_bytes:
        token = asyncio.run(TokenGenerator("abc").generate_async(8))
    token_bytes.assert_called_once_with(8)
    assert token == "abaabaab"


def test_generate_async_coroutine_default_length(rng_executor: Any) -> None:
    token = asyncio.run(TokenGenerator(12).generate_async())
    assert len(token) == 12


def test_generate_async_coroutine_zero_length(rng_executor: Any) -> None:
    assert asyncio.run(TokenGenerator().generate_async(0)) == ""


def test_generate_async_coroutine_error(rng_executor: Any) -> None:
    error = OSError("oops")
    with patch("tokgen.crypto.rng.token_bytes", side_effect=error):
        with pytest.raises(OSError) as exc_info:
            asyncio.run(TokenGenerator().generate_async(8))
    assert exc_info.value is error


@pytest.mark.parametrize("length", ["8", -1, print])
def test_generate_async_coroutine_invalid_length(length: Any) -> None:
    with pytest.raises((TokgenTypeError, TokgenValueError)):
        asyncio.run(TokenGenerator().generate_async(length))


def test_generate_async_coroutine_gather(rng_executor: Any) -> None:
    async def generate_many() -> list[str]:
        generator = TokenGenerator()
        return await asyncio.gather(*(generator.generate_async(16) for _ in range(10)))

    tokens = asyncio.run(generate_many())
    assert len(tokens) == 10
    assert all(len(token) == 16 for token in tokens)
    assert len(set(tokens)) == 10
