import dataclasses
import os
import sys
import tempfile
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from utils import logger as shop_logger  # noqa: E402


class LogFileConsoleTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.log_path = os.path.join(self.temp_dir.name, "shop.log")
        self._orig_settings = shop_logger.settings
        shop_logger.settings = dataclasses.replace(
            self._orig_settings, log_file=self.log_path
        )
        shop_logger._file_console = None

    def tearDown(self):
        shop_logger.close_log_file()
        shop_logger.settings = self._orig_settings
        self.temp_dir.cleanup()

    def test_console_is_shared_and_closed(self):
        console = shop_logger._console()
        self.assertIs(shop_logger._console(), console)
        log_file = console.file
        self.assertFalse(log_file.closed)

        shop_logger.close_log_file()
        self.assertTrue(log_file.closed)
        self.assertIsNone(shop_logger._file_console)

        # closing twice is harmless
        shop_logger.close_log_file()

    def test_no_log_file_uses_default_console(self):
        shop_logger.settings = dataclasses.replace(self._orig_settings, log_file=None)
        self.assertIsNone(shop_logger._console())


if __name__ == "__main__":
    unittest.main()
