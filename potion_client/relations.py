from functools import partial
from importlib import import_module
import inspect

from werkzeug.utils import cached_property

from . import signals
from .exceptions import InvalidRelationError
from .instances import ResponseNormalizer
from .resolvers import RelationContext, resolve_path
from .routes import RequestBuilder
from .utils import attribute_to_route_uri


class ModelReference(object):
    """
    A lazy reference to the target of a relation: a model class, ``'self'``, the class name of a model registered with
    the same :class:`Client`, or a dotted ``module.Class`` path.
    """

    def __init__(self, value):
        self.value = value

    def _registered(self, binding):
        client = getattr(binding, 'client', None)
        if client is None:
            return None
        return client.models.get(self.value)

    def _imported(self):
        module_name, _, class_name = self.value.rpartition('.')
        if not module_name:
            return None
        return getattr(import_module(module_name), class_name, None)

    def resolve(self, binding=None):
        """
        :param binding: the model the reference is declared on
        :raises RuntimeError: if the reference cannot be resolved
        """
        if self.value == 'self':
            return binding
        if inspect.isclass(self.value):
            return self.value

        model = self._registered(binding) or self._imported()
        if model is not None:
            return model

        owner = binding.__name__ if binding is not None else 'the relation'
        if getattr(binding, 'client', None) is None:
            raise RuntimeError('Cannot resolve model "{}" for {}: register {} with a Client first.'.format(
                self.value, owner, owner))
        raise RuntimeError('Cannot resolve model "{}" for {}: no model of that name is registered with {!r}; '
                           'register it with Client.add_model() before using the relation.'.format(
                               self.value, owner, binding.client))

    def __repr__(self):
        return "<ModelReference '{}'>".format(self.value)


class ResourceScope(object):
    """
    A chainable handle over a resource collection path, used for custom paths and relations.

    Supports the same reads as :class:`Model` (``get``, ``first``, ``find`` and the ``fetch_*`` variants), hydrating
    items as instances of ``model``.

    :param model: the model class used for hydration
    :param context: a :class:`RelationContext` of parents
    :param str path_name: path segment of the collection; defaults to ``model.meta.name``
    :param str custom_path: a literal path replacing the collection segment
    """

    def __init__(self, model, context=(), path_name=None, custom_path=None):
        self.model = model
        self.context = context if isinstance(context, RelationContext) else RelationContext(context)
        self.path_name = path_name
        self.custom_path = custom_path

    @property
    def path(self):
        return resolve_path(self.model.get_base_endpoint(),
                            self.path_name or self.model.meta.name,
                            context=self.context,
                            custom=self.custom_path)

    @property
    def builder(self):
        return RequestBuilder(self.path)

    @property
    def normalizer(self):
        return ResponseNormalizer(self.model, context=self.context, path_name=self.path_name)

    def _dispatch(self, request):
        return self.model.dispatch(request)

    def custom(self, path):
        return ResourceScope(self.model, self.context, self.path_name, custom_path=path)

    def get(self):
        return self.normalizer.collection(self._dispatch(self.builder.read_collection()))

    def first(self):
        return self.normalizer.first(self._dispatch(self.builder.read_collection()))

    def find(self, id=None):
        request = self.builder.read_one(id, method='find')
        return self.normalizer.one(self._dispatch(request))

    def fetch_get(self):
        return self.normalizer.unwrap(self._dispatch(self.builder.read_collection()))

    def fetch_first(self):
        return self.normalizer.unwrap_first(self._dispatch(self.builder.read_collection()))

    def fetch_find(self, id=None):
        request = self.builder.read_one(id, method='fetch_find')
        return self.normalizer.unwrap(self._dispatch(request))

    def new(self, data=None, **kwargs):
        """
        Returns a new, unsaved instance of the model that will be created within this scope.
        """
        return self.model.from_data(dict(data or {}, **kwargs),
                                    context=self.context,
                                    path_name=self.path_name,
                                    persisted=False)

    def create(self, data=None, **kwargs):
        """
        Saves a new instance within this scope and returns the item from the response, hydrated.
        """
        response = self.new(data, **kwargs).save()
        return self.normalizer.one(self.normalizer.unwrap(response))

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, self.path)


class RelationHandle(ResourceScope):
    """
    A :class:`ResourceScope` over the relation of one parent item, at ``{parent item path}/{relation path}``.

    Created fresh every time a relation accessor is called, e.g. ``post.comments()``.

    :raises InvalidRelationError: if the parent has no id
    """

    def __init__(self, parent, relation):
        if not parent.has_key():
            raise InvalidRelationError(parent, relation.attribute)

        context = parent._context.extend(parent._path_segment(), parent.key)
        super(RelationHandle, self).__init__(relation.target, context, path_name=relation.path)
        self.parent = parent
        self.relation = relation

    def _send(self, request, before, after, payload):
        before.send(self.model, item=payload, parent=self.parent)
        response = self._dispatch(request)
        after.send(self.model, item=payload, parent=self.parent, response=response)
        return response

    def attach(self, payload):
        """
        Sends ``payload`` as-is with a ``POST`` request to the relation itself.

        :param payload: a mapping, a list, or a :class:`Model` instance
        :return: response body
        """
        return self._send(self.builder.attach(payload), signals.before_attach, signals.after_attach, payload)

    def sync(self, payload):
        """
        Sends ``payload`` as-is with a ``PUT`` request to the relation itself.

        :param payload: a mapping, a list, or a :class:`Model` instance
        :return: response body
        """
        return self._send(self.builder.sync(payload), signals.before_sync, signals.after_sync, payload)


class HasMany(object):
    """
    Declares a one-to-many relation to another :class:`Model`. Accessing the attribute on an instance returns a
    function that creates a :class:`RelationHandle` for that instance.

    .. code-block:: python

        class Post(Model):
            comments = HasMany('Comment')

            class Meta:
                name = 'posts'

        Post(id=1).comments().get()  # GET {base_endpoint}/posts/1/comments

    The target can be given as:

    - a :class:`Model` class
    - the class name of a model registered with the same :class:`Client`
    - a string with a module name and class name of a model
    - ``"self"`` --- which resolves to the model this relation is declared on

    :param target: a model reference
    :param str path: path segment of the relation; defaults to the attribute name, replacing ``'_'`` with ``'-'``
    :param str attribute: name of the relation; defaults to the attribute name within the model
    """

    def __init__(self, target, path=None, attribute=None):
        self.reference = ModelReference(target)
        self.attribute = attribute
        self._path = path
        self.model = None

    def bind(self, model, attribute=None):
        if self.model is None:
            self.model = model
        if self.attribute is None:
            self.attribute = attribute
        return self

    @cached_property
    def target(self):
        return self.reference.resolve(self.model)

    @property
    def path(self):
        return self._path or attribute_to_route_uri(self.attribute)

    def __get__(self, obj, owner):
        if obj is None:
            return self
        return partial(RelationHandle, obj, self)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.reference.value)
