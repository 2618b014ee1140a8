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

__all__ = [
    "InvalidArgumentError",
    "StreamException",
    "UnopenableStreamError",
    "UnreadableStreamError",
    "UnseekableStreamError",
    "UntellableStreamError",
    "UnwritableStreamError",
]


class StreamException(Exception):
    """The base exception class for all rawstream exceptions."""


class InvalidArgumentError(StreamException):
    """Raised when a stream is constructed from something that is not an open binary handle."""


class UnopenableStreamError(StreamException):
    """Raised when a file cannot be opened, or a temporary file cannot be created."""


class UntellableStreamError(StreamException):
    """Raised when the stream pointer position cannot be determined."""


class UnseekableStreamError(StreamException):
    """Raised when the stream pointer cannot be moved."""


class UnwritableStreamError(StreamException):
    """Raised when the stream cannot be written to or truncated."""


class UnreadableStreamError(StreamException):
    """Raised when the stream cannot be read from."""
