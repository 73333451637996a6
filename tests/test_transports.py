import json
from unittest import TestCase, mock

import requests
from flask import Flask, jsonify, request

from potion_client import FlaskTransport, RequestsTransport, TransportError
from potion_client.routes import Request


def _response(status_code, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode('utf-8') if body is not None else b''
    return response


class RequestsTransportTestCase(TestCase):

    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        self.session.headers = {}
        self.transport = RequestsTransport(session=self.session, headers={'X-Token': 'abc'}, timeout=3)

    def test_headers(self):
        self.assertEqual({'X-Token': 'abc'}, self.session.headers)

    def test_get(self):
        self.session.request.return_value = _response(200, [{"id": 1}])

        body = self.transport.request(Request('GET', 'http://localhost/posts'))
        self.assertEqual([{"id": 1}], body)
        self.session.request.assert_called_once_with('GET', 'http://localhost/posts', timeout=3)

    def test_body_sent_as_json(self):
        self.session.request.return_value = _response(201, {"id": 1})

        self.transport.request(Request('POST', 'http://localhost/posts', {"title": "Cool!"}))
        self.session.request.assert_called_once_with('POST', 'http://localhost/posts',
                                                     timeout=3, json={"title": "Cool!"})

    def test_empty_response(self):
        self.session.request.return_value = _response(204)

        self.assertIsNone(self.transport.request(Request('DELETE', 'http://localhost/posts/1')))

    def test_non_json_response(self):
        self.session.request.return_value = _response(200, raw=b'OK')

        self.assertEqual('OK', self.transport.request(Request('GET', 'http://localhost/ping')))

    def test_error_status(self):
        self.session.request.return_value = _response(404, {"status": 404, "message": "Not Found"})
        request = Request('GET', 'http://localhost/posts/9')

        with self.assertRaises(TransportError) as cm:
            self.transport.request(request)

        self.assertEqual(404, cm.exception.status_code)
        self.assertEqual({"status": 404, "message": "Not Found"}, cm.exception.body)
        self.assertIs(request, cm.exception.request)
        self.assertEqual('404 Not Found', str(cm.exception))
        self.assertEqual({
            'error': 'TransportError',
            'message': '404 Not Found',
            'status': 404,
            'request': {'method': 'GET', 'url': 'http://localhost/posts/9'}
        }, cm.exception.as_dict())

    def test_connection_error(self):
        self.session.request.side_effect = requests.ConnectionError('refused')

        with self.assertRaises(TransportError) as cm:
            self.transport.request(Request('GET', 'http://localhost/posts'))

        self.assertIsNone(cm.exception.status_code)
        self.assertIsInstance(cm.exception.__cause__, requests.ConnectionError)


class FlaskTransportTestCase(TestCase):

    def setUp(self):
        app = Flask(__name__)

        @app.route('/echo', methods=['GET', 'POST', 'PUT', 'DELETE'])
        def echo():
            return jsonify({"method": request.method, "body": request.get_json(silent=True)})

        @app.route('/empty', methods=['DELETE'])
        def empty():
            return '', 204

        @app.route('/conflict', methods=['POST'])
        def conflict():
            return jsonify({"status": 409}), 409

        self.transport = FlaskTransport(app)

    def test_request(self):
        self.assertEqual({"method": "GET", "body": None},
                         self.transport.request(Request('GET', 'http://localhost/echo')))
        self.assertEqual({"method": "PUT", "body": {"id": 1}},
                         self.transport.request(Request('PUT', 'http://localhost/echo', {"id": 1})))

    def test_empty_response(self):
        self.assertIsNone(self.transport.request(Request('DELETE', 'http://localhost/empty')))

    def test_error_status(self):
        with self.assertRaises(TransportError) as cm:
            self.transport.request(Request('POST', 'http://localhost/conflict', {}))

        self.assertEqual(409, cm.exception.status_code)
        self.assertEqual({"status": 409}, cm.exception.body)
        self.assertEqual('409 Conflict', str(cm.exception))
