import logging

import requests
from werkzeug.http import HTTP_STATUS_CODES

from .exceptions import TransportError

log = logging.getLogger(__name__)


def _status_message(status_code):
    return '{} {}'.format(status_code, HTTP_STATUS_CODES.get(status_code, '')).strip()


class Transport(object):
    """
    The interface between models and HTTP. Any object with a compatible :meth:`request` method can be used as a
    transport.
    """

    def request(self, request):
        """
        Executes a request.

        :param routes.Request request: the request descriptor
        :return: the decoded response body, or ``None`` if the response was empty
        :raises TransportError: if the request failed or the response status was not 2xx
        """
        raise NotImplementedError()


class RequestsTransport(Transport):
    """
    A transport using a :class:`requests.Session`. Request bodies are sent as JSON.

    :param requests.Session session: an optional session, e.g. one configured with authentication
    :param dict headers: headers added to every request
    :param timeout: passed to :meth:`requests.Session.request`
    """

    def __init__(self, session=None, headers=None, timeout=None):
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)
        self.timeout = timeout

    def _decode(self, response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def request(self, request):
        kwargs = {'timeout': self.timeout}
        if request.body is not None:
            kwargs['json'] = request.body

        try:
            response = self.session.request(request.method, request.url, **kwargs)
        except requests.RequestException as e:
            log.warning('%s %s failed: %s', request.method, request.url, e)
            raise TransportError(str(e), request=request) from e

        body = self._decode(response)
        if not 200 <= response.status_code < 300:
            log.warning('%s %s returned %s', request.method, request.url, response.status_code)
            raise TransportError(_status_message(response.status_code),
                                 status_code=response.status_code,
                                 body=body,
                                 request=request)
        return body


class FlaskTransport(Transport):
    """
    A transport dispatching requests in-process to a Flask application through its test client. Useful for running
    models against a Flask (or Flask-Potion) API without a server.

    :param app: a :class:`flask.Flask` instance
    """

    def __init__(self, app):
        self.app = app
        self.client = app.test_client()

    def request(self, request):
        kwargs = {'method': request.method}
        if request.body is not None:
            kwargs['json'] = request.body

        response = self.client.open(request.url, **kwargs)
        body = response.get_json(silent=True)
        if body is None and response.data:
            body = response.get_data(as_text=True)

        if not 200 <= response.status_code < 300:
            raise TransportError(_status_message(response.status_code),
                                 status_code=response.status_code,
                                 body=body,
                                 request=request)
        return body
