import logging
import unittest
from utilkit import logger

class TestLogger(unittest.TestCase):
    def tearDown(self):
        logging.getLogger('utilkit').setLevel(logging.NOTSET)

    def test_get_logger_default_name(self):
        self.assertEqual(logger.get_logger().name, 'utilkit')

    def test_get_logger_child(self):
        self.assertEqual(logger.get_logger('utilkit.config').name, 'utilkit.config')

    def test_set_log_level(self):
        logger.set_log_level('debug')
        self.assertEqual(logging.getLogger('utilkit').level, logging.DEBUG)

    def test_set_log_level_unknown(self):
        logger.set_log_level('loud')
        self.assertEqual(logging.getLogger('utilkit').level, logging.NOTSET)

    def test_config_load_logs(self):
        from utilkit import config
        with self.assertLogs('utilkit.config', level='DEBUG') as captured:
            config.load_number_format()
        self.assertIn('Loaded number format', captured.output[0])

class TestPackageLogger(unittest.TestCase):
    def tearDown(self):
        logging.getLogger('utilkit').setLevel(logging.NOTSET)

    def test_logger_submodule_reachable(self):
        import utilkit
        self.assertIs(utilkit.logger, logger)
        utilkit.logger.set_log_level('WARNING')
        self.assertEqual(logging.getLogger('utilkit').level, logging.WARNING)

    def test_activate_logs(self):
        from types import SimpleNamespace
        import utilkit
        with self.assertLogs('utilkit', level='DEBUG') as captured:
            utilkit.activate(SimpleNamespace())
        self.assertIn('Activated', captured.output[0])
