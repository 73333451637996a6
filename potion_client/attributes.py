from .exceptions import MissingKeyError, ReadOnlyKeyError
from .utils import is_missing


class AttributeStore(object):
    """
    Holds the raw field data of a model instance.

    The primary key is an ordinary field stored under ``id_attribute``. Once :meth:`lock_key` has been called (which
    happens when an instance is hydrated from a response that includes its key), the key can no longer be changed.

    :param dict data: initial field values
    :param str id_attribute: name of the primary key field
    """

    def __init__(self, data=None, id_attribute='id'):
        self.id_attribute = id_attribute
        self._data = dict(data or {})
        self._key_locked = False

    def has_key(self):
        return not is_missing(self._data.get(self.id_attribute))

    @property
    def key(self):
        if not self.has_key():
            raise MissingKeyError()
        return self._data[self.id_attribute]

    def lock_key(self):
        if self.has_key():
            self._key_locked = True

    @property
    def key_locked(self):
        return self._key_locked

    def _check_key_write(self, name, value=None):
        if self._key_locked and name == self.id_attribute and value != self._data.get(name):
            raise ReadOnlyKeyError()

    def get(self, name, default=None):
        return self._data.get(name, default)

    def serialize(self):
        """
        :return: a copy of the complete attribute set, as sent on create and update
        """
        return dict(self._data)

    def __getitem__(self, name):
        return self._data[name]

    def __setitem__(self, name, value):
        self._check_key_write(name, value)
        self._data[name] = value

    def __delitem__(self, name):
        self._check_key_write(name)
        del self._data[name]

    def __contains__(self, name):
        return name in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if isinstance(other, AttributeStore):
            return self._data == other._data
        return self._data == other

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._data)
