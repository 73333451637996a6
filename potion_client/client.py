import logging

from .transports import RequestsTransport

log = logging.getLogger(__name__)


class Client(object):
    """
    Binds :class:`Model` classes to a base endpoint and a transport.

    :param str base_endpoint: root URL of the API, e.g. ``http://localhost``
    :param transport: an object with a ``request(request)`` method; defaults to a :class:`RequestsTransport`
        configured from ``config``
    :param dict config: an optional configuration dictionary

    Configuration keys:

    ============================  =====================================  ===========================================
    Key                           Default                                Description
    ============================  =====================================  ===========================================
    ``POTION_CLIENT_HEADERS``     ``{"Accept": "application/json"}``     Headers of the default transport
    ``POTION_CLIENT_TIMEOUT``     ``None``                               Timeout of the default transport
    ============================  =====================================  ===========================================
    """

    def __init__(self, base_endpoint, transport=None, config=None):
        self.base_endpoint = base_endpoint
        self.config = dict(config or {})
        self.config.setdefault('POTION_CLIENT_HEADERS', {'Accept': 'application/json'})
        self.config.setdefault('POTION_CLIENT_TIMEOUT', None)

        if transport is None:
            transport = RequestsTransport(headers=self.config['POTION_CLIENT_HEADERS'],
                                          timeout=self.config['POTION_CLIENT_TIMEOUT'])
        self.transport = transport
        self.models = {}

    def add_model(self, model):
        """
        Register a :class:`Model` class with the client. Can be used as a class decorator.

        :param Model model: model
        :return: the model
        """
        # prevent models from being added twice
        if model in self.models.values():
            return model

        if model.client is not None and model.client is not self:
            raise RuntimeError("Attempted to register a model that is already registered with a different Client.")

        model.client = self
        self.models[model.__name__] = model
        return model

    def dispatch(self, request):
        log.debug('%s %s', request.method, request.url)
        return self.transport.request(request)

    def __repr__(self):
        return '<Client {}>'.format(self.base_endpoint)
