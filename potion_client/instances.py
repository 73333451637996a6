from collections.abc import Mapping

from .exceptions import UnexpectedResponseError


class Collection(list):
    """
    A list of hydrated items.

    .. attribute:: meta

        Any members of the response envelope other than the payload itself, e.g. pagination details. Empty when the
        response was a bare array.
    """

    def __init__(self, items=(), meta=None):
        super(Collection, self).__init__(items)
        self.meta = meta or {}


class ResponseNormalizer(object):
    """
    Converts raw response bodies into hydrated instances of ``model`` (the *plain* convention) or unwraps them into
    raw data (the *fetch* convention).

    Hydrated instances carry ``context`` and ``path_name`` forward so that any relations and writes on them resolve
    against the same nested path they were read from.

    :param model: the model class to hydrate
    :param context: the :class:`resolvers.RelationContext` of the request
    :param str path_name: the path segment the items were read from, if it differs from the model's name
    """

    def __init__(self, model, context=(), path_name=None):
        self.model = model
        self.context = context
        self.path_name = path_name

    @property
    def envelope_key(self):
        return self.model.meta.envelope_key

    def _is_envelope(self, body):
        return isinstance(body, Mapping) and self.envelope_key in body

    def hydrate(self, data):
        if not isinstance(data, Mapping):
            raise UnexpectedResponseError(data)
        return self.model.from_data(data, context=self.context, path_name=self.path_name)

    def collection(self, body):
        meta = {}
        payload = body
        if self._is_envelope(body):
            meta = {k: v for k, v in body.items() if k != self.envelope_key}
            payload = body[self.envelope_key]

        if payload is None:
            items = []
        elif isinstance(payload, Mapping):
            items = [payload]
        elif isinstance(payload, list):
            items = payload
        else:
            raise UnexpectedResponseError(payload)

        return Collection([self.hydrate(item) for item in items], meta)

    def first(self, body):
        collection = self.collection(body)
        if collection:
            return collection[0]
        return self.hydrate({})

    def one(self, body):
        return self.hydrate(body or {})

    def unwrap(self, body):
        if self._is_envelope(body):
            return body[self.envelope_key]
        return body

    def unwrap_first(self, body):
        payload = self.unwrap(body)
        if isinstance(payload, list):
            return payload[0] if payload else {}
        if payload is None:
            return {}
        return payload
