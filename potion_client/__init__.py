from . import signals
from .client import Client
from .exceptions import PotionClientException, MissingParameterError, MissingKeyError, InvalidRelationError, \
    ReadOnlyKeyError, TransportError, UnexpectedResponseError
from .instances import Collection
from .model import Model
from .relations import HasMany, RelationHandle, ResourceScope
from .routes import Request
from .transports import Transport, RequestsTransport, FlaskTransport

__all__ = (
    'Client',
    'Model',
    'HasMany',
    'RelationHandle',
    'ResourceScope',
    'Collection',
    'Request',
    'Transport',
    'RequestsTransport',
    'FlaskTransport',
    'PotionClientException',
    'MissingParameterError',
    'MissingKeyError',
    'InvalidRelationError',
    'ReadOnlyKeyError',
    'TransportError',
    'UnexpectedResponseError',
    'signals',
)
