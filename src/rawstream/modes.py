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

"""Helpers for fopen-style mode strings.

Capabilities are decided from the mode string alone, so a handle opened "rb+" is both readable and writable even if
the underlying device would refuse one of the two.
"""

import os
from typing import Any, BinaryIO

from ._types import PathLike

__all__ = [
    "READABLE_FLAGS",
    "WRITABLE_FLAGS",
    "get_mode",
    "is_readable_mode",
    "is_writable_mode",
    "open_file",
]

READABLE_FLAGS = "r+"
"""Any of these characters in a mode string makes the handle readable."""

WRITABLE_FLAGS = "acwx+"
"""Any of these characters in a mode string makes the handle writable."""

_CREATE_MODE_CHARS = frozenset("cb+")


def is_readable_mode(mode: str) -> bool:
    """Check whether a mode string allows reading.

    :param mode: The mode string, e.g. "rb" or "w+b".

    :returns: True if the mode contains any of the readable flags.
    """
    return any(flag in mode for flag in READABLE_FLAGS)


def is_writable_mode(mode: str) -> bool:
    """Check whether a mode string allows writing.

    :param mode: The mode string, e.g. "rb" or "w+b".

    :returns: True if the mode contains any of the writable flags.
    """
    return any(flag in mode for flag in WRITABLE_FLAGS)


def _ask(handle: Any, name: str) -> bool:
    method = getattr(handle, name, None)
    if not callable(method):
        return False
    try:
        return bool(method())
    except (OSError, ValueError):
        return False


def get_mode(handle: Any) -> str:
    """Get the mode string of an open handle.

    Handles that do not report a mode (such as `io.BytesIO`) get one derived from `readable()` and `writable()`.

    :param handle: An open binary handle.

    :returns: The mode string.
    """
    mode = getattr(handle, "mode", None)
    if isinstance(mode, str):
        return mode

    readable = _ask(handle, "readable")
    writable = _ask(handle, "writable")
    if readable and writable:
        return "r+b"
    elif readable:
        return "rb"
    elif writable:
        return "wb"
    else:
        return "b"


def _open_for_create(filename: PathLike, mode: str) -> BinaryIO:
    # "c" opens for writing, creating the file if needed, without truncating it.
    if mode.count("c") != 1 or not set(mode) <= _CREATE_MODE_CHARS:
        raise ValueError(f"invalid mode: {mode!r}")

    update = "+" in mode
    flags = os.O_CREAT | (os.O_RDWR if update else os.O_WRONLY) | getattr(os, "O_BINARY", 0)
    fd = os.open(filename, flags, 0o666)
    try:
        return os.fdopen(fd, "rb+" if update else "wb")
    except BaseException:
        os.close(fd)
        raise


def open_file(filename: PathLike, mode: str) -> BinaryIO:
    """Open a file in binary mode.

    The text flag "t" is ignored and "b" is implied. In addition to the modes accepted by `open()`, the "c" and "c+"
    modes open a file for writing (and reading with "+"), creating it if it does not exist, without truncating it.

    :param filename: The file to open.
    :param mode: The mode to open the file in.

    :returns: The open binary file.

    :raises OSError: If the file cannot be opened.
    :raises ValueError: If the mode is invalid.
    """
    binary_mode = mode.replace("t", "")
    if "b" not in binary_mode:
        binary_mode += "b"

    if "c" in binary_mode:
        return _open_for_create(filename, binary_mode)
    return open(filename, binary_mode)
