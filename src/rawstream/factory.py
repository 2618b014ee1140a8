#  Copyright © 2025 Bentley Systems, Incorporated
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#      http://www.apache.org/licenses/LICENSE-2.0
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import os
import tempfile
from typing import Any, BinaryIO

from . import logging
from ._types import Content, PathLike, as_bytes
from .exceptions import UnopenableStreamError
from .interfaces import IStreamFactory
from .modes import open_file
from .stream import Stream

logger = logging.getLogger("factory")

__all__ = [
    "DEFAULT_MAX_MEMORY",
    "StreamFactory",
]

DEFAULT_MAX_MEMORY = 2 * 1024 * 1024
"""Streams created by `StreamFactory.create_stream` are held in memory until they grow past this many bytes."""


def _fill(handle: BinaryIO, data: bytes) -> BinaryIO:
    if data:
        handle.write(data)
        handle.seek(0)
    return handle


class StreamFactory(IStreamFactory):
    """`rawstream.interfaces.IStreamFactory` implementation that creates `rawstream.Stream` objects."""

    def __init__(self, max_memory: int = DEFAULT_MAX_MEMORY, temp_dir: PathLike | None = None) -> None:
        """
        :param max_memory: The number of bytes a stream from `create_stream` may hold in memory before it is moved to
            a temporary file. Zero keeps them in memory regardless of size.
        :param temp_dir: The directory for temporary files. If None, the platform default is used.

        :raises ValueError: If max_memory is negative.
        """
        if max_memory < 0:
            raise ValueError(f"max_memory must not be negative, got {max_memory}")
        self._max_memory = max_memory
        self._temp_dir = os.fspath(temp_dir) if temp_dir is not None else None

    @property
    def max_memory(self) -> int:
        """The in-memory limit of streams created by `create_stream`."""
        return self._max_memory

    @property
    def temp_dir(self) -> str | None:
        """The directory for temporary files, or None for the platform default."""
        return self._temp_dir

    def create_stream(self, content: Content = "") -> Stream:
        data = as_bytes(content)
        handle = tempfile.SpooledTemporaryFile(max_size=self._max_memory, mode="w+b", dir=self._temp_dir)
        return Stream(_fill(handle, data))

    def create_stream_from_file(self, filename: PathLike, mode: str = "r") -> Stream:
        logger.debug(f"Opening {filename} in mode {mode!r}")
        try:
            handle = open_file(filename, mode)
        except (OSError, ValueError) as e:
            raise UnopenableStreamError(f'Unable to open file "{os.fsdecode(filename)}" in mode "{mode}"') from e
        return Stream(handle)

    def create_stream_from_resource(self, handle: Any) -> Stream:
        return Stream(handle)

    def create_stream_from_temporary_file(self, content: Content | None = None) -> Stream:
        data = as_bytes(content) if content is not None else b""
        try:
            handle = tempfile.TemporaryFile(mode="w+b", dir=self._temp_dir)
        except OSError as e:
            raise UnopenableStreamError("Unable to create a temporary file") from e

        logger.debug(f"Created temporary file in {self._temp_dir or tempfile.gettempdir()}")
        return Stream(_fill(handle, data))
