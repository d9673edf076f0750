import asyncio
import unittest
from unittest.mock import MagicMock

import requests

from cloudprint_client.cloudprint.client import PrinterClient
from cloudprint_client.cloudprint.models import ConnectionStatus, SubmitRequest
from cloudprint_client.exceptions import InvalidRequestError


class TestAsyncWrappers(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.session = MagicMock()
        self.session.get.return_value.text = 'Auth=abc123\n'
        self.session.post.return_value.json.return_value = {'success': True, 'printers': [], 'jobs': []}
        self.client = PrinterClient('u', 'p', session=self.session)

    async def test_search_async(self):
        result = await self.client.search_async('office', ConnectionStatus.ONLINE)
        self.assertTrue(result.success)
        self.assertEqual(self.session.post.call_args[0][0], 'https://www.google.com/cloudprint/search')

    async def test_concurrent_calls(self):
        results = await asyncio.gather(
            self.client.get_jobs_async(),
            self.client.get_jobs_async('p1'),
            self.client.delete_job_async('j1'),
            self.client.get_printer_details_async('p1'),
            self.client.share_printer_async('p1', 'a@example.com'),
            self.client.unshare_printer_async('p1', 'a@example.com'),
            self.client.print_document_async('p1', 't', b'x', 'text/plain'),
        )
        self.assertTrue(all(r.success for r in results))
        self.assertEqual(self.session.post.call_count, 7)
        self.assertEqual(self.session.get.call_count, 1)

    async def test_failure_mapping_preserved(self):
        self.session.post.side_effect = requests.exceptions.ConnectionError('Connection refused')
        result = await self.client.get_jobs_async()
        self.assertFalse(result.success)
        self.assertIn('Connection refused', result.message)

    async def test_invalid_submit_raises(self):
        with self.assertRaises(InvalidRequestError):
            await self.client.submit_async(SubmitRequest(printerid='p1', content=None, content_type='text/plain'))
        self.session.post.assert_not_called()


if __name__ == '__main__':
    unittest.main()
