from collections.abc import Mapping

from . import signals
from .attributes import AttributeStore
from .relations import HasMany, ResourceScope
from .resolvers import RelationContext
from .utils import AttributeDict

# instance state kept outside of the attribute store
_INSTANCE_SLOTS = frozenset(('_attributes', '_context', '_path_name'))


class ModelMeta(type):

    def __new__(mcs, name, bases, members):
        class_ = super(ModelMeta, mcs).__new__(mcs, name, bases, members)
        class_.meta = meta = AttributeDict(getattr(class_, 'meta', {}) or {})
        class_.relations = relations = dict(getattr(class_, 'relations', None) or {})

        for base in bases:
            if hasattr(base, 'Meta'):
                meta.update({k: v for k, v in base.Meta.__dict__.items() if not k.startswith('__')})

        if 'Meta' in members:
            changes = members['Meta'].__dict__
            for k, v in changes.items():
                if not k.startswith('__'):
                    meta[k] = v

            if not changes.get('name', None):
                meta['name'] = name.lower()
        else:
            meta['name'] = name.lower()

        for n, m in members.items():
            if isinstance(m, HasMany):
                relations[n] = m.bind(class_, n)

        return class_


class Model(object, metaclass=ModelMeta):
    """
    An item of a REST resource.

    A model is configured using its `Meta` attribute; any :class:`HasMany` attributes declare relations. Models must be
    registered with a :class:`Client` before any request is made.

    :class:`Meta` class attributes:

    =====================  ==============================  ==============================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==============================================================
    name                   ---                             Path segment of the resource; defaults to the lower-case of
                                                           the class name
    base_endpoint          ``None``                        Root URL of the resource; defaults to the base endpoint of
                                                           the :class:`Client`
    id_attribute           ``"id"``                        Name of the primary key field
    envelope_key           ``"data"``                      Name of the member holding the payload in enveloped responses
    =====================  ==============================  ==============================================================

    Usage example:

    .. code-block:: python

        client = Client('http://localhost')

        @client.add_model
        class Post(Model):
            comments = HasMany('Comment')

            class Meta:
                name = 'posts'

        @client.add_model
        class Comment(Model):
            class Meta:
                name = 'comments'

        post = Post.find(1)
        comment = post.comments().first()
        comment.text = 'Owh!'
        comment.save()  # PUT http://localhost/posts/1/comments/{comment.id}

    Fields can be read and written both as attributes and as items. Fields whose names collide with model methods are
    only available as items. A field named ``data`` cannot be passed as a keyword argument, since ``data`` is the
    mapping argument of the constructor; use ``Post({"data": ...})`` instead.

    .. attribute:: client

        Back reference to the :class:`Client` this model is registered with.

    .. attribute:: meta

        A :class:`AttributeDict` of configuration attributes collected from the :class:`Meta` attributes of the base
        classes.

    .. attribute:: relations

        A dictionary of the :class:`HasMany` relations declared on this model, keyed by attribute name.
    """
    client = None
    meta = None
    relations = None

    def __init__(self, data=None, **kwargs):
        object.__setattr__(self, '_attributes', AttributeStore(dict(data or {}, **kwargs), self.meta.id_attribute))
        object.__setattr__(self, '_context', RelationContext())
        object.__setattr__(self, '_path_name', None)

    @classmethod
    def from_data(cls, data, context=(), path_name=None, persisted=True):
        """
        Creates an instance from a mapping of fields, reached through ``context``.

        :param dict data: field values
        :param context: a :class:`RelationContext` or a sequence of ``(name, id)`` pairs
        :param str path_name: the path segment of the collection the item belongs to, if not ``meta.name``
        :param bool persisted: whether the item was read from the server; if so, its id cannot be changed
        """
        item = cls(data)
        if not isinstance(context, RelationContext):
            context = RelationContext(context)
        object.__setattr__(item, '_context', context)
        object.__setattr__(item, '_path_name', path_name)
        if persisted:
            item._attributes.lock_key()
        return item

    @classmethod
    def get_client(cls):
        if cls.client is None:
            raise RuntimeError("'{}' is not registered with a Client.".format(cls.__name__))
        return cls.client

    @classmethod
    def get_base_endpoint(cls):
        return cls.meta.base_endpoint or cls.get_client().base_endpoint

    @classmethod
    def dispatch(cls, request):
        return cls.get_client().dispatch(request)

    @classmethod
    def scope(cls):
        return ResourceScope(cls)

    @classmethod
    def get(cls):
        """
        :return: a :class:`Collection` of all items of the resource
        """
        return cls.scope().get()

    @classmethod
    def first(cls):
        """
        :return: the first item of the resource or, if there are none, an empty instance
        """
        return cls.scope().first()

    @classmethod
    def find(cls, id=None):
        """
        :param id: item id
        :raises MissingParameterError: if no id is given
        """
        return cls.scope().find(id)

    @classmethod
    def fetch_get(cls):
        return cls.scope().fetch_get()

    @classmethod
    def fetch_first(cls):
        return cls.scope().fetch_first()

    @classmethod
    def fetch_find(cls, id=None):
        return cls.scope().fetch_find(id)

    @classmethod
    def custom(cls, path):
        """
        Returns a :class:`ResourceScope` for a literal path, hydrating items as instances of this model.

        :param str path: path used in place of the resource URL
        """
        return cls.scope().custom(path)

    @classmethod
    def create(cls, data=None, **kwargs):
        return cls.scope().create(data, **kwargs)

    def _path_segment(self):
        return self._path_name or self.meta.name

    def _scope(self):
        return ResourceScope(self.__class__, self._context, self._path_name)

    def has_key(self):
        return self._attributes.has_key()

    @property
    def key(self):
        """
        :raises MissingKeyError: if the item has no id
        """
        return self._attributes.key

    def to_dict(self):
        return self._attributes.serialize()

    def save(self):
        """
        Creates the item with a ``POST`` request if it has no id; otherwise updates it with a ``PUT`` request. All
        fields are sent.

        :return: response body
        """
        if self.has_key():
            before, after = signals.before_update, signals.after_update
        else:
            before, after = signals.before_create, signals.after_create

        before.send(self.__class__, item=self)
        response = self.dispatch(self._scope().builder.save(self))
        after.send(self.__class__, item=self, response=response)
        return response

    def delete(self):
        """
        :raises MissingKeyError: if the item has no id
        :return: response body
        """
        request = self._scope().builder.delete(self)
        signals.before_delete.send(self.__class__, item=self)
        response = self.dispatch(request)
        signals.after_delete.send(self.__class__, item=self, response=response)
        return response

    def __getattr__(self, name):
        if name in _INSTANCE_SLOTS or (name.startswith('__') and name.endswith('__')):
            raise AttributeError(name)
        try:
            return self._attributes[name]
        except KeyError:
            raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def __setattr__(self, name, value):
        if name in _INSTANCE_SLOTS:
            object.__setattr__(self, name, value)
        else:
            self._attributes[name] = value

    def __delattr__(self, name):
        if name in _INSTANCE_SLOTS:
            object.__delattr__(self, name)
            return
        try:
            del self._attributes[name]
        except KeyError:
            raise AttributeError(name)

    def __getitem__(self, name):
        return self._attributes[name]

    def __setitem__(self, name, value):
        self._attributes[name] = value

    def __delitem__(self, name):
        del self._attributes[name]

    def __contains__(self, name):
        return name in self._attributes

    def __eq__(self, other):
        if isinstance(other, Model):
            return self.__class__ is other.__class__ and self._attributes == other._attributes
        if isinstance(other, Mapping):
            return self._attributes == dict(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return '<{} {!r}>'.format(self.__class__.__name__, self.to_dict())

    class Meta:
        name = None
        base_endpoint = None
        id_attribute = 'id'
        envelope_key = 'data'
