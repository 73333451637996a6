from collections import namedtuple

from .exceptions import MissingParameterError
from .utils import is_missing

HTTP_METHODS = ('GET', 'PUT', 'POST', 'DELETE')


class Request(namedtuple('Request', ('method', 'url', 'body'))):
    """
    A transport-ready request descriptor.

    :param str method: one of ``GET``, ``POST``, ``PUT`` or ``DELETE``
    :param str url: fully resolved URL
    :param body: data to be serialized by the transport, ``None`` for no body
    """
    __slots__ = ()

    def __new__(cls, method, url, body=None):
        if method not in HTTP_METHODS:
            raise ValueError('Unsupported HTTP method: {}'.format(method))
        return super(Request, cls).__new__(cls, method, url, body)

    def __repr__(self):
        return '<Request {} {}>'.format(self.method, self.url)


def _serialize(payload):
    if hasattr(payload, 'to_dict'):
        return payload.to_dict()
    return payload


class RequestBuilder(object):
    """
    Maps logical operations on a resource collection onto :class:`Request` descriptors.

    :param str path: the resolved collection path, without any item id
    """

    def __init__(self, path):
        self.path = path

    def _item_url(self, id):
        return '{}/{}'.format(self.path, id)

    def read_collection(self):
        return Request('GET', self.path)

    def read_one(self, id, method='find'):
        if is_missing(id):
            raise MissingParameterError(method)
        return Request('GET', self._item_url(id))

    def create(self, instance):
        return Request('POST', self.path, _serialize(instance))

    def update(self, instance):
        return Request('PUT', self._item_url(instance.key), _serialize(instance))

    def save(self, instance):
        if instance.has_key():
            return self.update(instance)
        return self.create(instance)

    def delete(self, instance):
        return Request('DELETE', self._item_url(instance.key))

    def attach(self, payload):
        return Request('POST', self.path, _serialize(payload))

    def sync(self, payload):
        return Request('PUT', self.path, _serialize(payload))
