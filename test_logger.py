"""
Logging / configuration tests
"""
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from nordic_ids.utils.config import Config
from nordic_ids.utils.logger import get_logger, logger, setup_logger


class TestSetupLogger(unittest.TestCase):
    """setup_logger"""

    def tearDown(self):
        for name in ('NordicIdsTest', 'NordicIdsFileTest', 'NordicIdsQuietTest'):
            test_logger = logging.getLogger(name)
            for handler in list(test_logger.handlers):
                handler.close()
                test_logger.removeHandler(handler)

    def test_idempotent(self):
        first = setup_logger('NordicIdsTest')
        handlers = list(first.handlers)
        second = setup_logger('NordicIdsTest')
        self.assertIs(first, second)
        self.assertEqual(second.handlers, handlers)

    def test_console_only_by_default(self):
        with patch.object(Config, 'LOG_FILE', None):
            test_logger = setup_logger('NordicIdsTest')
        self.assertEqual(len(test_logger.handlers), 1)
        self.assertIsInstance(test_logger.handlers[0], logging.StreamHandler)

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'nordic_ids.log')
            test_logger = setup_logger('NordicIdsFileTest', log_file=path, level='INFO')
            test_logger.info("identifier issued")
            for handler in test_logger.handlers:
                handler.flush()
            with open(path, encoding='utf-8') as f:
                content = f.read()
            for handler in list(test_logger.handlers):
                handler.close()
                test_logger.removeHandler(handler)
        self.assertIn("NordicIdsFileTest - INFO - identifier issued", content)

    def test_configures_logger_with_null_handler(self):
        quiet = logging.getLogger('NordicIdsQuietTest')
        quiet.addHandler(logging.NullHandler())
        with patch.object(Config, 'LOG_FILE', None):
            test_logger = setup_logger('NordicIdsQuietTest')
        self.assertTrue(any(type(h) is logging.StreamHandler for h in test_logger.handlers))

    def test_level(self):
        test_logger = setup_logger('NordicIdsTest', level='debug')
        self.assertEqual(test_logger.level, logging.DEBUG)


class TestGetLogger(unittest.TestCase):
    """get_logger"""

    def test_default(self):
        self.assertIs(get_logger(), logger)

    def test_package_logger_is_silent_by_default(self):
        self.assertTrue(logger.handlers)
        for handler in logger.handlers:
            self.assertIsInstance(handler, logging.NullHandler)

    def test_child_of_package_logger(self):
        child = get_logger('nordic_ids.validators.checksum')
        self.assertEqual(child.name, 'NordicIds.nordic_ids.validators.checksum')
        self.assertIs(child.parent, logger)

    def test_already_qualified(self):
        self.assertEqual(get_logger('NordicIds.sub').name, 'NordicIds.sub')


class TestConfig(unittest.TestCase):
    """Config.reload"""

    def tearDown(self):
        Config.reload()

    def test_reload_reads_environment(self):
        env = {
            'NORDIC_IDS_LOG_LEVEL': 'WARNING',
            'NORDIC_IDS_LOG_FILE': '/tmp/ids.log',
            'NORDIC_IDS_NODE_NAME': 'build-01',
        }
        with patch.dict(os.environ, env):
            Config.reload()
            self.assertEqual(Config.LOG_LEVEL, 'WARNING')
            self.assertEqual(Config.LOG_FILE, '/tmp/ids.log')
            self.assertEqual(Config.NODE_NAME, 'build-01')

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            Config.reload()
            self.assertEqual(Config.LOG_LEVEL, 'INFO')
            self.assertIsNone(Config.LOG_FILE)
            self.assertIsNone(Config.NODE_NAME)


if __name__ == '__main__':
    unittest.main()
