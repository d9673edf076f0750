import unittest

from cloudprint_client.cloudprint.models import (
    GenericResponse,
    JobsResponse,
    Printer,
    PrinterDetailsResponse,
    SearchPrintersResponse,
)


class TestGenericResponse(unittest.TestCase):

    def test_from_json(self):
        response = GenericResponse.from_json({
            'success': True,
            'xsrf_token': 'AIp06D',
            'request': {
                'time': '0',
                'users': ['user@example.com'],
                'params': {'printerid': ['p1']},
                'user': 'user@example.com',
            },
        })
        self.assertTrue(response.success)
        self.assertEqual(response.xsrf_token, 'AIp06D')
        self.assertEqual(response.request.users, ['user@example.com'])
        self.assertEqual(response.request.params, {'printerid': ['p1']})

    def test_missing_fields_default(self):
        response = GenericResponse.from_json({})
        self.assertFalse(response.success)
        self.assertEqual(response.message, '')
        self.assertIsNone(response.request)

    def test_failure(self):
        response = GenericResponse.failure('Connection refused')
        self.assertFalse(response.success)
        self.assertEqual(response.message, 'Connection refused')


class TestTypedResponses(unittest.TestCase):

    def test_generic_fields_readable_on_typed_response(self):
        response = SearchPrintersResponse.from_json({
            'success': True,
            'message': 'ok',
            'printers': [],
        })
        self.assertTrue(response.success)
        self.assertEqual(response.message, 'ok')
        self.assertEqual(response.error_code, '')
        self.assertIs(response.success, response.generic.success)

    def test_generic_fields_written_through(self):
        response = JobsResponse.from_json({'success': True, 'jobs': []})
        response.success = False
        response.message = 'cancelled'
        self.assertFalse(response.generic.success)
        self.assertEqual(response.generic.message, 'cancelled')
        self.assertNotIn('success', vars(response))

        response.jobs = None
        self.assertIsNone(response.jobs)

    def test_unknown_attribute(self):
        with self.assertRaises(AttributeError):
            JobsResponse().not_a_field

    def test_failure_has_empty_payload(self):
        for response_type in (SearchPrintersResponse, JobsResponse, PrinterDetailsResponse):
            response = response_type.failure('boom')
            self.assertFalse(response.success)
            self.assertEqual(response.message, 'boom')

        self.assertEqual(JobsResponse.failure('boom').jobs, [])
        self.assertEqual(SearchPrintersResponse.failure('boom').printers, [])

    def test_search_printer_fields(self):
        printer = Printer.from_json({
            'id': 'p1',
            'name': 'Office',
            'proxy': 'proxy-1',
            'status': '',
            'capsHash': 'abc',
            'createTime': '1375210000000',
            'confirmed': True,
            'numberOfDocuments': '12',
            'numberOfPages': 40,
        })
        self.assertEqual(printer.caps_hash, 'abc')
        self.assertEqual(printer.create_time, '1375210000000')
        self.assertTrue(printer.confirmed)
        self.assertEqual(printer.number_of_documents, 12)
        self.assertEqual(printer.number_of_pages, 40)

    def test_printer_details(self):
        response = PrinterDetailsResponse.from_json({
            'success': True,
            'printers': [{
                'id': 'p1',
                'displayName': 'Office Laser',
                'connectionStatus': 'ONLINE',
                'isTosAccepted': 'false',
                'tags': ['duplex'],
                'access': [{'email': 'a@example.com', 'role': 'OWNER', 'is_pending': 'false'}],
                'capabilities': [{
                    'name': 'psk:PageMediaSize',
                    'psf:SelectionType': 'psk:PickOne',
                    'type': 'Feature',
                    'options': [{
                        'name': 'psk:ISOA4',
                        'psk:DisplayName': 'A4',
                        'psk:MediaSizeWidth': '210000',
                        'psk:MediaSizeHeight': '297000',
                        'default': 'true',
                    }],
                }],
            }],
        })
        detail = response.printers[0]
        self.assertEqual(detail.display_name, 'Office Laser')
        self.assertEqual(detail.connection_status, 'ONLINE')
        self.assertFalse(detail.is_tos_accepted)
        self.assertEqual(detail.access[0].role, 'OWNER')

        capability = detail.capabilities[0]
        self.assertEqual(capability.selection_type, 'psk:PickOne')
        self.assertEqual(capability.options[0].display_name, 'A4')
        self.assertEqual(capability.options[0].media_size_width, '210000')

    def test_null_lists(self):
        response = JobsResponse.from_json({'success': True, 'jobs': None})
        self.assertEqual(response.jobs, [])


if __name__ == '__main__':
    unittest.main()
