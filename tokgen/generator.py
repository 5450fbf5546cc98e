#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Secure random token generator.

The generator maps secure random bytes onto a configured alphabet. Each output
character is selected by a running sum of all bytes seen so far, reduced modulo
the alphabet size::

    >>> transform_buffer(bytes(range(8)), "abc")
    'abaabaab'

The selection is intentionally not uniform when the alphabet size does not divide
256, and it must stay exactly as is: tokens pinned to known byte sequences depend
on it.

Tokens are produced either synchronously, with a completion callback invoked on a
worker thread, or by awaiting :meth:`TokenGenerator.generate_async`.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from typing_extensions import Self

from tokgen.crypto import rng
from tokgen.exceptions import TokgenTypeError, TokgenValueError
from tokgen.utils.config import Config
from tokgen.utils.expand import expand_string

logger = logging.getLogger(__name__)

DEFAULT_CHARS = "0-9a-zA-Z"
DEFAULT_LENGTH = 32

TokenCallback = Callable[[Optional[BaseException], Optional[str]], None]
GeneratorOptions = Union[None, str, int, float, Mapping]


def transform_buffer(buffer: Iterable[int], chars: Sequence[str]) -> str:
    """Map random bytes onto the alphabet.

    :param buffer: Random bytes, one output character is produced for each of them.
    :param chars: Non-empty alphabet.
    :return: Token of the same length as the buffer.
    """
    result = []
    cursor = 0
    for byte in buffer:
        cursor += byte
        result.append(chars[cursor % len(chars)])
    return "".join(result)


def _resolve_length(value: Any, name: str) -> int:
    """Validate the token length.

    Integer valued floats are accepted, booleans are not.

    :param value: Length to validate.
    :param name: Name of the value used in error messages.
    :raises TokgenTypeError: The value is not an integer.
    :raises TokgenValueError: The value is negative.
    :return: The length as integer.
    """
    if isinstance(value, bool):
        raise TokgenTypeError(f"`{name}` must be an integer, not bool")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise TokgenTypeError(f"`{name}` must be an integer, not {type(value).__name__}")
    if value < 0:
        raise TokgenValueError(f"`{name}` must not be negative, got {value}")
    return value


def _normalize_options(options: GeneratorOptions) -> dict[str, Any]:
    """Turn any accepted options shape into a dictionary with defaults applied.

    :param options: Mapping, bare alphabet expression, bare length or None.
    :raises TokgenTypeError: Unsupported shape of options.
    :return: Dictionary with ``chars`` and ``length`` keys.
    """
    if options is None:
        given: dict[str, Any] = {}
    elif isinstance(options, str):
        given = {"chars": options}
    elif isinstance(options, (int, float)) and not isinstance(options, bool):
        given = {"length": options}
    elif isinstance(options, Mapping):
        given = dict(options)
    else:
        raise TokgenTypeError(
            f"Options must be a mapping, a string or an integer, not {type(options).__name__}"
        )

    normalized: dict[str, Any] = {"chars": DEFAULT_CHARS, "length": DEFAULT_LENGTH}
    normalized.update({key: value for key, value in given.items() if value is not None})
    return normalized


@dataclass(frozen=True)
class TokenGeneratorOptions:
    """Immutable generator configuration.

    :ivar chars: Expanded alphabet.
    :ivar length: Default token length.
    :ivar expression: Range expression the alphabet was expanded from.
    """

    chars: tuple[str, ...]
    length: int
    expression: str

    @classmethod
    def create(cls, options: GeneratorOptions = None) -> Self:
        """Build the configuration from any accepted options shape.

        :param options: Mapping with optional ``chars`` and ``length``, bare range
            expression, bare length or None for defaults.
        :raises TokgenTypeError: The alphabet expression is not a string or the length
            is not an integer.
        :raises TokgenValueError: The length is negative or the alphabet is empty.
        :return: Validated configuration.
        """
        normalized = _normalize_options(options)
        expression = normalized["chars"]
        if not isinstance(expression, str):
            raise TokgenTypeError("`options.chars` must be a string")
        length = _resolve_length(normalized["length"], "options.length")

        chars = tuple(expand_string(expression))
        if not chars:
            raise TokgenValueError(f"Expression '{expression}' denotes no characters")
        return cls(chars=chars, length=length, expression=expression)


class TokenGenerator:
    """Secure random token generator.

    The generator is immutable and holds no state besides its configuration, one
    instance may serve concurrent calls from any number of threads.
    """

    def __init__(self, options: GeneratorOptions = None) -> None:
        """Initialize the generator.

        :param options: Mapping with optional ``chars`` (range expression, defaults to
            ``"0-9a-zA-Z"``) and ``length`` (defaults to 32), a bare string used as
            ``chars`` or a bare integer used as ``length``.
        :raises TokgenTypeError: Invalid type of alphabet expression or length.
        :raises TokgenValueError: Negative length or empty alphabet.
        """
        self._options = TokenGeneratorOptions.create(options)
        logger.debug(
            f"Token generator created: {len(self._options.chars)} characters, "
            f"default length {self._options.length}"
        )

    @classmethod
    def from_chars(cls, chars: str) -> Self:
        """Create generator with the given alphabet and default length.

        :param chars: Range expression of the alphabet.
        :return: Token generator.
        """
        return cls({"chars": chars})

    @classmethod
    def from_length(cls, length: int) -> Self:
        """Create generator with the given default length and default alphabet.

        :param length: Default token length.
        :return: Token generator.
        """
        return cls({"length": length})

    @property
    def options(self) -> TokenGeneratorOptions:
        """Generator configuration."""
        return self._options

    @property
    def chars(self) -> tuple[str, ...]:
        """Expanded alphabet."""
        return self._options.chars

    @property
    def length(self) -> int:
        """Default token length."""
        return self._options.length

    def __repr__(self) -> str:
        return (
            f"TokenGenerator(chars={self._options.expression!r}, length={self._options.length})"
        )

    def _normalize_request(
        self, length: Union[None, int, float, TokenCallback], on_complete: Optional[TokenCallback]
    ) -> tuple[int, Optional[TokenCallback]]:
        """Resolve the arguments of :meth:`generate`.

        :param length: Token length, or the completion callback when it is callable.
        :param on_complete: Completion callback.
        :raises TokgenTypeError: Non-callable callback or non-integer length.
        :raises TokgenValueError: Negative length.
        :return: Tuple of resolved length and callback.
        """
        if callable(length):
            on_complete = length
            length = None
        elif on_complete is not None and not callable(on_complete):
            raise TokgenTypeError("`on_complete` must be callable")

        if length is None:
            return self._options.length, on_complete
        return _resolve_length(length, "length"), on_complete

    def generate(
        self,
        length: Union[None, int, float, TokenCallback] = None,
        on_complete: Optional[TokenCallback] = None,
    ) -> Optional[str]:
        """Generate a token.

        Without a callback the random bytes are fetched synchronously and the token is
        returned; failures of the random source are raised.

        With a callback the call returns None immediately. The callback is invoked
        exactly once from a worker thread, never inline within this call, either as
        ``on_complete(None, token)`` or as ``on_complete(error, None)``.

        :param length: Token length, defaults to the configured one. A callable passed
            here is used as the completion callback.
        :param on_complete: Completion callback.
        :raises TokgenTypeError: Non-callable callback or non-integer length.
        :raises TokgenValueError: Negative length.
        :return: The token in synchronous mode, None otherwise.
        """
        token_length, callback = self._normalize_request(length, on_complete)
        chars = self._options.chars
        logger.debug(f"Generating token of {token_length} characters")

        if callback is None:
            return transform_buffer(rng.random_bytes(token_length), chars)

        def on_random_bytes(error: Optional[BaseException], buffer: Optional[bytes]) -> None:
            if error is not None:
                callback(error, None)
                return
            assert buffer is not None
            callback(None, transform_buffer(buffer, chars))

        rng.random_bytes_async(token_length, on_random_bytes)
        return None

    async def generate_async(self, length: Optional[Union[int, float]] = None) -> str:
        """Generate a token without blocking the event loop.

        :param length: Token length, defaults to the configured one.
        :raises TokgenTypeError: Non-integer length.
        :raises TokgenValueError: Negative length.
        :return: The token.
        """
        if callable(length):
            raise TokgenTypeError("`length` must be an integer")
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[str]" = loop.create_future()

        def settle(error: Optional[BaseException], token: Optional[str]) -> None:
            # cancelled while the bytes were being fetched
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(token or "")

        self.generate(
            length, lambda error, token: loop.call_soon_threadsafe(settle, error, token)
        )
        return await future

    @classmethod
    def get_validation_schemas(cls) -> list[dict[str, Any]]:
        """Get validation schemas of the generator configuration.

        :return: List of validation schemas.
        """
        return [
            {
                "type": "object",
                "title": "Token generator",
                "properties": {
                    "chars": {
                        "type": "string",
                        "title": "Alphabet",
                        "description": "Range expression of the token alphabet, e.g. '0-9a-f'.",
                        "minLength": 1,
                    },
                    "length": {
                        "type": "integer",
                        "title": "Token length",
                        "description": "Default number of characters of generated tokens.",
                        "minimum": 0,
                    },
                },
                "additionalProperties": False,
            }
        ]

    @classmethod
    def load_from_config(cls, config: Config) -> Self:
        """Create generator from configuration.

        :param config: Generator configuration with optional ``chars`` and ``length``.
        :raises TokgenError: Invalid configuration.
        :return: Token generator.
        """
        config.check(cls.get_validation_schemas())
        return cls({"chars": config.get("chars"), "length": config.get("length")})

    def get_config(self) -> Config:
        """Get configuration of the generator.

        :return: Configuration loadable by :meth:`load_from_config`.
        """
        return Config({"chars": self._options.expression, "length": self._options.length})
