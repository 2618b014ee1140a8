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

import tempfile
import unittest
from io import BytesIO
from pathlib import Path

from parameterized import parameterized

from rawstream.modes import get_mode, is_readable_mode, is_writable_mode, open_file

from .common import TEST_DATA, StreamTestCase


class TestModeFlags(unittest.TestCase):
    @parameterized.expand(
        [
            ("r", True, False),
            ("rb", True, False),
            ("r+b", True, True),
            ("rb+", True, True),
            ("w", False, True),
            ("wb", False, True),
            ("w+b", True, True),
            ("a", False, True),
            ("a+", True, True),
            ("x", False, True),
            ("xb+", True, True),
            ("c", False, True),
            ("c+b", True, True),
            ("b", False, False),
        ]
    )
    def test_mode_flags(self, mode: str, readable: bool, writable: bool) -> None:
        self.assertEqual(readable, is_readable_mode(mode))
        self.assertEqual(writable, is_writable_mode(mode))


class _ReadOnlyBuffer(BytesIO):
    def writable(self) -> bool:
        return False


class _WriteOnlyBuffer(BytesIO):
    def readable(self) -> bool:
        return False


class _ModeBuffer(BytesIO):
    mode = "ab"


class TestGetMode(StreamTestCase):
    @parameterized.expand(
        [
            ("read and write", BytesIO, "r+b"),
            ("read only", _ReadOnlyBuffer, "rb"),
            ("write only", _WriteOnlyBuffer, "wb"),
            ("reported", _ModeBuffer, "ab"),
        ]
    )
    def test_get_mode(self, _label: str, buffer_type: type[BytesIO], expected: str) -> None:
        handle = self.track(buffer_type())
        self.assertEqual(expected, get_mode(handle))

    def test_get_mode_pipe(self) -> None:
        reader, writer = self.open_pipe()
        self.assertEqual("rb", get_mode(reader))
        self.assertEqual("wb", get_mode(writer))


class TestOpenFile(StreamTestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.path = Path(tmp.name) / "data.bin"
        self.path.write_bytes(TEST_DATA)

    @parameterized.expand(
        [
            ("implied binary", "r"),
            ("explicit binary", "rb"),
            ("text flag", "rt"),
        ]
    )
    def test_open_file_is_binary(self, _label: str, mode: str) -> None:
        handle = self.track(open_file(self.path, mode))
        self.assertEqual(TEST_DATA, handle.read())

    def test_open_file_create_does_not_truncate(self) -> None:
        handle = self.track(open_file(self.path, "c+"))
        self.assertEqual(TEST_DATA, handle.read())

    def test_open_file_create_missing(self) -> None:
        path = self.path.with_name("new.bin")
        handle = self.track(open_file(path, "c"))
        handle.write(TEST_DATA)
        handle.close()
        self.assertEqual(TEST_DATA, path.read_bytes())

    @parameterized.expand(
        [
            ("create twice", "cc"),
            ("create and write", "cw"),
        ]
    )
    def test_open_file_invalid_create_mode(self, _label: str, mode: str) -> None:
        with self.assertRaises(ValueError):
            open_file(self.path, mode)


if __name__ == "__main__":
    unittest.main()
