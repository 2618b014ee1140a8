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
import unittest
from io import BytesIO
from typing import BinaryIO

from rawstream import Stream

__all__ = [
    "TEST_DATA",
    "StreamTestCase",
]

TEST_DATA = b"Hello, world!"


class StreamTestCase(unittest.TestCase):
    """Base class for tests that need handles which are cleaned up after each test."""

    def track(self, handle: BinaryIO) -> BinaryIO:
        """Close the handle when the test finishes, if nothing else has."""
        self.addCleanup(handle.close)
        return handle

    def open_pipe(self) -> tuple[BinaryIO, BinaryIO]:
        """Open a pipe, giving a read-only and a write-only handle, neither of which is seekable."""
        read_fd, write_fd = os.pipe()
        return self.track(open(read_fd, "rb")), self.track(open(write_fd, "wb"))

    def memory_stream(self, content: bytes = b"") -> tuple[BytesIO, Stream]:
        """Create a stream over a BytesIO buffer holding the given content, positioned at the start."""
        handle = self.track(BytesIO(content))
        return handle, Stream(handle)
