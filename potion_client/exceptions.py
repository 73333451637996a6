class PotionClientException(Exception):
    message = None

    def __init__(self, message=None):
        super(PotionClientException, self).__init__(message or self.message)

    def as_dict(self):
        return {
            'error': self.__class__.__name__,
            'message': str(self)
        }


class MissingParameterError(PotionClientException):

    def __init__(self, method, parameter='id'):
        super(MissingParameterError, self).__init__(
            'You must specify the param on {}() method.'.format(method))
        self.method = method
        self.parameter = parameter

    def as_dict(self):
        dct = super(MissingParameterError, self).as_dict()
        dct['parameter'] = self.parameter
        return dct


class MissingKeyError(PotionClientException, KeyError):
    message = 'This model has a empty ID.'

    def __str__(self):
        # KeyError would repr() the message
        return Exception.__str__(self)


class InvalidRelationError(PotionClientException):
    message = 'The parent must be persisted before accessing its relations.'

    def __init__(self, parent=None, relation=None):
        super(InvalidRelationError, self).__init__()
        self.parent = parent
        self.relation = relation

    def as_dict(self):
        dct = super(InvalidRelationError, self).as_dict()
        if self.relation is not None:
            dct['relation'] = self.relation
        return dct


class ReadOnlyKeyError(PotionClientException, AttributeError):
    message = 'The ID of a persisted model cannot be changed.'


class TransportError(PotionClientException):
    """
    Raised by a transport when a request fails, either because the server responded with a non-2xx status or because
    no response was received at all.

    :param str message: description of the failure
    :param int status_code: HTTP status code, ``None`` for network failures
    :param body: decoded response body, if any
    :param request: the :class:`routes.Request` that failed
    """

    def __init__(self, message, status_code=None, body=None, request=None):
        super(TransportError, self).__init__(message)
        self.status_code = status_code
        self.body = body
        self.request = request

    def as_dict(self):
        dct = super(TransportError, self).as_dict()
        dct['status'] = self.status_code
        if self.request is not None:
            dct['request'] = {
                'method': self.request.method,
                'url': self.request.url
            }
        return dct


class UnexpectedResponseError(PotionClientException):
    """
    Raised when a response body cannot be hydrated into model instances, e.g. because it is plain text.

    :param body: the decoded response body
    """

    def __init__(self, body):
        super(UnexpectedResponseError, self).__init__(
            'Expected an object or an array of objects, got {}.'.format(type(body).__name__))
        self.body = body
