from flask import Flask
from unittest import TestCase

from potion_client import Client, FlaskTransport


class RecordingTransport(object):
    """
    A transport that records requests and replies with queued bodies, or ``{}`` once the queue is empty. Queued
    exceptions are raised instead of returned.
    """

    def __init__(self, *replies):
        self.requests = []
        self.replies = list(replies)

    def reply(self, body):
        self.replies.append(body)
        return self

    def request(self, request):
        self.requests.append(request)
        body = self.replies.pop(0) if self.replies else {}
        if isinstance(body, Exception):
            raise body
        return body

    @property
    def last(self):
        return self.requests[-1]


class BaseTestCase(TestCase):

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.app = self.create_app()
        self.transport = RecordingTransport()
        self.client = Client('http://localhost', transport=self.transport)

    def create_app(self):
        app = Flask(__name__)
        app.debug = True
        return app

    def use_app(self):
        self.client.transport = FlaskTransport(self.app)

    def assertRequest(self, method, url, body=None, request=None):
        request = request or self.transport.last
        self.assertEqual((method, url, body), (request.method, request.url, request.body))
