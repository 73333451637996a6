from .exceptions import InvalidRelationError
from .utils import is_missing


class RelationContext(tuple):
    """
    The chain of parents through which a resource was reached, as an ordered tuple of ``(resource_name, id)`` pairs.
    Empty for top-level resources.
    """

    def __new__(cls, parents=()):
        parents = tuple(tuple(parent) for parent in parents)
        for name, id in parents:
            if is_missing(id):
                raise InvalidRelationError()
        return super(RelationContext, cls).__new__(cls, parents)

    def extend(self, name, id):
        return RelationContext(self + ((name, id),))

    def segments(self):
        for name, id in self:
            yield '/{}/{}'.format(name, id)

    def __repr__(self):
        return 'RelationContext({})'.format(tuple.__repr__(self))


def resolve_path(base_endpoint, name, id=None, context=(), custom=None):
    """
    Returns the URL of a resource collection or, if ``id`` is given, of an item within it.

    ``{base_endpoint}[/{parent}/{parent_id}]*/{name}[/{id}]``

    A ``custom`` path replaces ``name``. Without a relation context the custom path is used as-is, without
    the base endpoint.

    :param str base_endpoint: root URL
    :param str name: resource name
    :param id: item id
    :param context: a :class:`RelationContext` or a sequence of ``(name, id)`` pairs
    :param str custom: a literal path replacing the resource name
    :raises InvalidRelationError: if any parent in the context has no id
    """
    if not isinstance(context, RelationContext):
        context = RelationContext(context)

    if custom is not None and not context:
        path = custom
    else:
        path = ''.join([(base_endpoint or '').rstrip('/')] +
                       list(context.segments()) +
                       ['/', custom if custom is not None else name])

    if not is_missing(id):
        path = '{}/{}'.format(path, id)
    return path
