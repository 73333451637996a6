def attribute_to_route_uri(s):
    return s.replace('_', '-')


def is_missing(value):
    return value is None or value == ''


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__
