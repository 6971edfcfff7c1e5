import logging
import os
import unittest

from sudoku_pro.common.constants import LOG_LEVEL_ENV_VAR
from sudoku_pro.utils.log import get_logger, set_log_level


class TestLogger(unittest.TestCase):
    def setUp(self):
        self._saved = os.environ.get(LOG_LEVEL_ENV_VAR)

    def tearDown(self):
        if self._saved is None:
            os.environ.pop(LOG_LEVEL_ENV_VAR, None)
        else:
            os.environ[LOG_LEVEL_ENV_VAR] = self._saved

    def test_level_from_env(self):
        os.environ[LOG_LEVEL_ENV_VAR] = "error"
        logger = get_logger("sudoku_pro.test.env")
        self.assertEqual(logger.level, logging.ERROR)

    def test_explicit_level(self):
        logger = get_logger("sudoku_pro.test.explicit", level="debug")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_single_handler(self):
        first = get_logger("sudoku_pro.test.handler")
        second = get_logger("sudoku_pro.test.handler")
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertFalse(second.propagate)

    def test_set_log_level(self):
        logger = get_logger("sudoku_pro.test.set_level", level="INFO")
        set_log_level("warning")
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(os.environ[LOG_LEVEL_ENV_VAR], "WARNING")
