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

import io
import os
import tempfile
from dataclasses import asdict, dataclass
from types import TracebackType
from typing import Any

from . import logging
from ._types import Content, as_bytes
from .exceptions import (
    InvalidArgumentError,
    UnreadableStreamError,
    UnseekableStreamError,
    UntellableStreamError,
    UnwritableStreamError,
)
from .interfaces import IStream
from .modes import get_mode, is_readable_mode, is_writable_mode

logger = logging.getLogger("stream")

__all__ = [
    "Stream",
    "StreamMetadata",
    "is_open_handle",
]

_NOT_RESOURCEABLE = "Stream is not resourceable"

_HANDLE_METHODS = ("read", "write", "seek")


def is_open_handle(obj: Any) -> bool:
    """Check whether an object is an open binary handle.

    Any `io.IOBase` that is not a text stream qualifies, as does any object with callable `read`, `write` and `seek`
    methods and a `closed` flag (for example the wrapper returned by `tempfile.TemporaryFile` on some platforms).

    :param obj: The object to check.

    :returns: True if the object is an open binary handle.
    """
    if obj is None or isinstance(obj, io.TextIOBase):
        return False
    if not isinstance(obj, io.IOBase) and not all(callable(getattr(obj, name, None)) for name in _HANDLE_METHODS):
        return False
    try:
        return not obj.closed
    except (AttributeError, ValueError):
        return False


def _fileno(handle: Any) -> int | None:
    # SpooledTemporaryFile rolls over to disk when asked for a descriptor.
    if isinstance(handle, (io.BytesIO, tempfile.SpooledTemporaryFile)):
        return None
    try:
        return handle.fileno()
    except (AttributeError, OSError, ValueError):
        return None


@dataclass(frozen=True)
class StreamMetadata:
    """Metadata about the handle wrapped by a stream."""

    stream_type: str
    """The class name of the handle."""

    wrapper_type: str | None
    """"memory" for `io.BytesIO`, "temp" for spooled temporary files, "plainfile" for file descriptors, else None."""

    mode: str
    """The mode the handle was opened with."""

    seekable: bool
    """Whether the stream pointer can be moved."""

    uri: str | None
    """The file path, if the handle has one."""

    blocked: bool
    """Whether the underlying file descriptor is in blocking mode."""

    @classmethod
    def from_handle(cls, handle: Any, seekable: bool) -> StreamMetadata:
        """Describe an open handle.

        :param handle: An open binary handle.
        :param seekable: Whether the handle is seekable.

        :returns: The metadata for the handle.
        """
        fd = _fileno(handle)

        if isinstance(handle, tempfile.SpooledTemporaryFile):
            wrapper_type = "temp"
        elif isinstance(handle, io.BytesIO):
            wrapper_type = "memory"
        elif fd is not None:
            wrapper_type = "plainfile"
        else:
            wrapper_type = None

        name = getattr(handle, "name", None)
        uri = os.fsdecode(name) if isinstance(name, (str, bytes, os.PathLike)) else None

        blocked = True
        if fd is not None:
            try:
                blocked = os.get_blocking(fd)
            except (AttributeError, OSError):
                pass

        return cls(
            stream_type=type(handle).__name__,
            wrapper_type=wrapper_type,
            mode=get_mode(handle),
            seekable=seekable,
            uri=uri,
            blocked=blocked,
        )


class Stream(IStream):
    """`rawstream.interfaces.IStream` implementation that wraps a binary file-like object.

    The stream owns the handle until it is detached or closed. Every operation checks that the handle is still open and
    that the handle's mode allows the operation before delegating to it. Failures are raised as subtypes of
    `rawstream.exceptions.StreamException`, with the original error chained as the cause.
    """

    def __init__(self, handle: Any) -> None:
        """
        :param handle: An open binary handle, such as `io.BytesIO` or a file opened in binary mode.

        :raises InvalidArgumentError: If the handle is not an open binary handle.
        """
        if not is_open_handle(handle):
            raise InvalidArgumentError("Invalid stream resource")
        self._handle = handle
        self._drained = False

    def __repr__(self) -> str:
        if self._handle is None:
            return f"<{type(self).__name__} detached>"
        return f"<{type(self).__name__} {type(self._handle).__name__}>"

    def __enter__(self) -> Stream:
        return self

    def __exit__(
        self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()

    def is_resourceable(self) -> bool:
        return is_open_handle(self._handle)

    def detach(self) -> Any | None:
        handle, self._handle = self._handle, None
        self._drained = False
        return handle

    def close(self) -> None:
        handle = self.detach()
        if not is_open_handle(handle):
            return

        logger.debug(f"Closing {type(handle).__name__}")
        try:
            handle.close()
        except Exception:
            logger.warning("Error while closing the stream handle.", exc_info=True)

    def _end_position(self) -> int:
        """Find the end of a seekable handle, leaving the stream pointer where it was."""
        position = self._handle.tell()
        end = self._handle.seek(0, os.SEEK_END)
        if end != position:
            self._handle.seek(position)
        return end

    def eof(self) -> bool:
        if not self.is_seekable():
            # The end of a pipe is only known once a read has come back empty.
            return not self.is_resourceable() or self._drained

        try:
            return self._handle.tell() >= self._end_position()
        except (OSError, ValueError):
            logger.debug("Unable to locate the end of the stream.", exc_info=True)
            return True

    def tell(self) -> int:
        if not self.is_resourceable():
            raise UntellableStreamError(_NOT_RESOURCEABLE)

        try:
            return self._handle.tell()
        except (OSError, ValueError) as e:
            raise UntellableStreamError("Unable to get the stream pointer position") from e

    def is_seekable(self) -> bool:
        if not self.is_resourceable():
            return False

        seekable = getattr(self._handle, "seekable", None)
        if not callable(seekable):
            return False
        try:
            return bool(seekable())
        except (OSError, ValueError):
            return False

    def _require_seekable(self) -> None:
        if not self.is_resourceable():
            raise UnseekableStreamError(_NOT_RESOURCEABLE)
        if not self.is_seekable():
            raise UnseekableStreamError("Stream is not seekable")

    def rewind(self) -> None:
        self._require_seekable()
        try:
            self._handle.seek(0, os.SEEK_SET)
        except (OSError, ValueError) as e:
            raise UnseekableStreamError("Unable to move the stream pointer to beginning") from e

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        self._require_seekable()
        try:
            self._handle.seek(offset, whence)
        except (OSError, ValueError) as e:
            raise UnseekableStreamError("Unable to move the stream pointer to the given position") from e

    def is_writable(self) -> bool:
        if not self.is_resourceable():
            return False
        return is_writable_mode(get_mode(self._handle))

    def _require_writable(self) -> None:
        if not self.is_resourceable():
            raise UnwritableStreamError(_NOT_RESOURCEABLE)
        if not self.is_writable():
            raise UnwritableStreamError("Stream is not writable")

    def write(self, data: Content) -> int:
        self._require_writable()
        try:
            written = self._handle.write(as_bytes(data))
        except (OSError, ValueError) as e:
            raise UnwritableStreamError("Unable to write to the stream") from e

        # Non-blocking raw handles return None when nothing could be written.
        if written is None:
            raise UnwritableStreamError("Unable to write to the stream")
        return written

    def truncate(self, length: int = 0) -> None:
        self._require_writable()
        try:
            self._handle.truncate(length)
        except (OSError, ValueError) as e:
            raise UnwritableStreamError("Unable to truncate the stream") from e

    def is_readable(self) -> bool:
        if not self.is_resourceable():
            return False
        return is_readable_mode(get_mode(self._handle))

    def _require_readable(self) -> None:
        if not self.is_resourceable():
            raise UnreadableStreamError(_NOT_RESOURCEABLE)
        if not self.is_readable():
            raise UnreadableStreamError("Stream is not readable")

    def _read(self, length: int) -> bytes | None:
        # A pipe may never fill the request, so take whatever a single read returns.
        read1 = getattr(self._handle, "read1", None)
        if callable(read1) and not self.is_seekable():
            return read1(length)
        return self._handle.read(length)

    def read(self, length: int) -> bytes:
        self._require_readable()
        try:
            data = self._read(length)
        except (OSError, ValueError) as e:
            raise UnreadableStreamError("Unable to read from the stream") from e

        if data is None:
            raise UnreadableStreamError("Unable to read from the stream")
        if length > 0 and not data:
            self._drained = True
        return data

    def get_contents(self) -> bytes:
        self._require_readable()
        try:
            data = self._handle.read()
        except (OSError, ValueError) as e:
            raise UnreadableStreamError("Unable to read remainder of the stream") from e

        if data is None:
            raise UnreadableStreamError("Unable to read remainder of the stream")
        self._drained = True
        return data

    def get_metadata(self, key: str | None = None) -> Any:
        if not self.is_resourceable():
            return None

        metadata = asdict(StreamMetadata.from_handle(self._handle, self.is_seekable()))
        if key is None:
            return metadata
        return metadata.get(key)

    def get_size(self) -> int | None:
        if not self.is_resourceable():
            return None

        fd = _fileno(self._handle)
        try:
            if fd is not None:
                # Buffered writes are not visible to fstat until flushed.
                flush = getattr(self._handle, "flush", None)
                if callable(flush) and self.is_writable():
                    flush()
                return os.fstat(fd).st_size
            elif self.is_seekable():
                return self._end_position()
        except (OSError, ValueError):
            logger.debug("Unable to determine the stream size.", exc_info=True)
        return None

    def __bytes__(self) -> bytes:
        """Get the full contents of the stream.

        The stream is rewound first if it is seekable. Returns empty bytes if the stream is not readable or anything
        goes wrong, including a failed rewind. This method never raises.
        """
        try:
            if self.is_readable():
                if self.is_seekable():
                    self.rewind()
                return self.get_contents()
        except Exception:
            logger.debug("Unable to convert the stream to bytes.", exc_info=True)
        return b""

    def __str__(self) -> str:
        """Get the full contents of the stream, decoded as UTF-8. See `Stream.__bytes__`."""
        return bytes(self).decode("utf-8", errors="replace")
