import logging

from .header import Header

logger = logging.getLogger(__name__)

_missing = object()


class Headers(tuple):
    """
    An immutable, ordered sequence of Header objects. Names are stored exactly
    as given and a name may appear more than once. Lookup by name is always
    case-insensitive; lookup by position behaves like a tuple.
    """

    __slots__ = ()

    def __new__(cls, headers=()):
        return super(Headers, cls).__new__(
            cls, (Header(*header) for header in headers))

    def __contains__(self, item):
        if not isinstance(item, str):
            return super(Headers, self).__contains__(item)
        item = item.lower()
        for header in self:
            if header.name.lower() == item:
                return True
        return False

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Headers(super(Headers, self).__getitem__(key))
        if not isinstance(key, str):
            return super(Headers, self).__getitem__(key)
        for value in self.find_all(key):
            return value
        raise KeyError(key)

    def find_all(self, name):
        name = name.lower()
        for header in self:
            if header.name.lower() == name:
                yield header.value

    def get(self, name, default=None):
        if name in self:
            return self[name]
        return default

    def keys(self):
        return [header.name for header in self]

    def values(self):
        return [header.value for header in self]

    def items(self):
        return list(self)

    def __repr__(self):
        return 'Headers(%r)' % list(self)


class _PendingHeader(object):
    """The name half of a header added with collector(name).to(value)."""

    def __init__(self, collector, name):
        self.collector = collector
        self.name = name

    def to(self, value):
        self.collector.add(self.name, value)


class HeaderCollector(object):
    """
    Accumulates headers during one RequestBuilder.headers call. All forms of
    adding a header append to the same list, in call order:

        h.add('Accept', '*/*')
        h.add(('Accept', '*/*'))
        h('Accept').to('*/*')
        h.header('Accept', '*/*')

    Names and values are not validated or normalized.
    """

    def __init__(self):
        self.headers = []

    def __len__(self):
        return len(self.headers)

    def __iter__(self):
        return iter(self.headers)

    def __call__(self, name):
        return _PendingHeader(self, name)

    def add(self, name, value=_missing):
        if value is _missing:
            if isinstance(name, str):
                raise TypeError(
                    "add() needs a value for header %r, or a (name, value) "
                    "pair" % (name,))
            name, value = name
        logger.debug('adding header %r', name)
        self.headers.append(Header(name, value))

    def header(self, name, value):
        self.add(name, value)

    def __repr__(self):
        return 'HeaderCollector(%r)' % self.headers
