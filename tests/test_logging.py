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

import unittest

from rawstream import StreamFactory, logging


class TestLogging(unittest.TestCase):
    def test_relative_name(self) -> None:
        self.assertEqual("rawstream.stream", logging.getLogger("stream").name)

    def test_qualified_name(self) -> None:
        self.assertEqual("rawstream.factory", logging.getLogger("rawstream.factory").name)
        self.assertEqual("rawstream", logging.getLogger("rawstream").name)

    def test_factory_logs_open(self) -> None:
        with self.assertLogs("rawstream.factory", "DEBUG") as cm:
            with StreamFactory().create_stream_from_temporary_file():
                pass
        self.assertTrue(any("Created temporary file" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
