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
from pathlib import Path
from typing import TypeAlias

__all__ = [
    "Content",
    "PathLike",
    "as_bytes",
]

PathLike: TypeAlias = str | os.PathLike | Path

Content: TypeAlias = bytes | bytearray | memoryview | str


def as_bytes(content: Content) -> bytes:
    """Convert content to bytes. Strings are encoded as UTF-8.

    :param content: The content to convert.

    :returns: The content as bytes.

    :raises TypeError: If the content is not a string or a bytes-like object.
    """
    if isinstance(content, str):
        return content.encode("utf-8")
    elif isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    else:
        raise TypeError(f"Expected str or bytes-like content, got {type(content).__name__}")
