import logging
import unittest
from unittest.mock import MagicMock, patch

from cloudprint_client.logging import setup_logging, setup_logging_from_config, get_logger


class TestLogging(unittest.TestCase):

    @patch('logging.basicConfig')
    def test_level_name_from_config(self, mock_basic_config):
        setup_logging('debug')
        self.assertEqual(mock_basic_config.call_args[1]['level'], logging.DEBUG)
        self.assertEqual(len(mock_basic_config.call_args[1]['handlers']), 1)

    @patch('logging.basicConfig')
    def test_unknown_level_falls_back_to_info(self, mock_basic_config):
        setup_logging('chatty')
        self.assertEqual(mock_basic_config.call_args[1]['level'], logging.INFO)

    @patch('cloudprint_client.logging.setup_logging')
    def test_setup_from_config(self, mock_setup):
        config = MagicMock(logging_level='WARNING', logging_file='cloudprint.log')
        setup_logging_from_config(config)
        mock_setup.assert_called_once_with('WARNING', 'cloudprint.log')

    def test_get_logger(self):
        self.assertEqual(get_logger('cloudprint_client.test').name, 'cloudprint_client.test')


if __name__ == '__main__':
    unittest.main()
