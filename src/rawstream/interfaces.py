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

from __future__ import annotations

import os
from types import TracebackType
from typing import Any

from pure_interface import Interface

from ._types import Content, PathLike

__all__ = [
    "IStream",
    "IStreamFactory",
]


class IStream(Interface):
    """Interface for a stream of bytes backed by a single binary handle.

    An IStream exclusively owns its handle until the handle is detached or the stream is closed. Once the handle is
    gone, capability queries report False, `eof()` reports True, and I/O operations raise the appropriate
    `rawstream.exceptions.StreamException` subtype.

    IStream implementations should be context managers that close the stream when exited.
    """

    def is_resourceable(self) -> bool:
        """Check whether the stream owns a handle that is still open."""
        ...  # pragma: no cover

    def detach(self) -> Any | None:
        """Detach the handle from the stream.

        Ownership of the handle passes to the caller. Calling detach again returns None.

        :return: The handle, or None if the stream has no handle.
        """
        ...  # pragma: no cover

    def close(self) -> None:
        """Close the stream and the underlying handle.

        Closing a stream that has no open handle does nothing. close() never raises.
        """
        ...  # pragma: no cover

    def eof(self) -> bool:
        """Check whether the end of the stream has been reached."""
        ...  # pragma: no cover

    def tell(self) -> int:
        """Get the position of the stream pointer.

        :raise UntellableStreamError: If the stream has no handle or the position cannot be determined.
        """
        ...  # pragma: no cover

    def is_seekable(self) -> bool:
        """Check whether the stream pointer can be moved."""
        ...  # pragma: no cover

    def rewind(self) -> None:
        """Move the stream pointer to the beginning of the stream.

        :raise UnseekableStreamError: If the stream has no handle, is not seekable, or the seek fails.
        """
        ...  # pragma: no cover

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        """Move the stream pointer to the given position.

        :param offset: The offset, relative to whence.
        :param whence: One of `os.SEEK_SET`, `os.SEEK_CUR` or `os.SEEK_END`.

        :raise UnseekableStreamError: If the stream has no handle, is not seekable, or the seek fails.
        """
        ...  # pragma: no cover

    def is_writable(self) -> bool:
        """Check whether the stream can be written to."""
        ...  # pragma: no cover

    def write(self, data: Content) -> int:
        """Write data to the stream.

        :param data: The data to write. Strings are encoded as UTF-8.

        :return: The number of bytes written.

        :raise UnwritableStreamError: If the stream has no handle, is not writable, or the write fails.
        """
        ...  # pragma: no cover

    def truncate(self, length: int = 0) -> None:
        """Truncate the stream to the given length. The stream pointer is not moved.

        :param length: The new length of the stream, in bytes.

        :raise UnwritableStreamError: If the stream has no handle, is not writable, or the truncation fails.
        """
        ...  # pragma: no cover

    def is_readable(self) -> bool:
        """Check whether the stream can be read from."""
        ...  # pragma: no cover

    def read(self, length: int) -> bytes:
        """Read up to length bytes from the stream.

        :param length: The maximum number of bytes to read.

        :return: The bytes read.

        :raise UnreadableStreamError: If the stream has no handle, is not readable, or the read fails.
        """
        ...  # pragma: no cover

    def get_contents(self) -> bytes:
        """Read the remainder of the stream, from the current position to the end.

        :raise UnreadableStreamError: If the stream has no handle, is not readable, or the read fails.
        """
        ...  # pragma: no cover

    def get_metadata(self, key: str | None = None) -> Any:
        """Get the stream metadata.

        :param key: If given, only the value for this key is returned.

        :return: A dictionary of metadata, the value for the given key, or None if the stream has no handle or the
            key is unknown.
        """
        ...  # pragma: no cover

    def get_size(self) -> int | None:
        """Get the size of the stream in bytes.

        :return: The size, or None if the stream has no handle or the size cannot be determined.
        """
        ...  # pragma: no cover

    def __enter__(self) -> IStream:
        """IStream should be a context manager that closes the stream when exited."""
        ...

    def __exit__(
        self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: TracebackType | None
    ) -> None:
        """IStream should be a context manager that closes the stream when exited."""
        ...


class IStreamFactory(Interface):
    """Interface for creating streams."""

    def create_stream(self, content: Content = "") -> IStream:
        """Create a readable and writable in-memory stream.

        :param content: Initial content. The returned stream is positioned at the beginning.
        """
        ...  # pragma: no cover

    def create_stream_from_file(self, filename: PathLike, mode: str = "r") -> IStream:
        """Create a stream from a file.

        :param filename: The file to open.
        :param mode: The mode to open the file in. Files are always opened in binary mode.

        :raise UnopenableStreamError: If the file cannot be opened.
        """
        ...  # pragma: no cover

    def create_stream_from_resource(self, handle: Any) -> IStream:
        """Create a stream from an existing open binary handle.

        :param handle: The handle. The new stream takes ownership of it.

        :raise InvalidArgumentError: If the handle is not an open binary handle.
        """
        ...  # pragma: no cover

    def create_stream_from_temporary_file(self, content: Content | None = None) -> IStream:
        """Create a stream backed by a temporary file that is removed when the stream is closed.

        :param content: Initial content. The returned stream is positioned at the beginning.

        :raise UnopenableStreamError: If the temporary file cannot be created.
        """
        ...  # pragma: no cover
