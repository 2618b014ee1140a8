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

import logging

__all__ = [
    "ROOT_LOGGER_NAME",
    "getLogger",
]

ROOT_LOGGER_NAME = "rawstream"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def getLogger(name: str) -> logging.Logger:
    """Get a logger in the rawstream namespace.

    :param name: The logger name, relative to the rawstream root logger. Fully qualified module names that already
        start with `rawstream` are used as-is.

    :return: The logger.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
