import collections


class Header(collections.namedtuple('Header', ['name', 'value'])):
    """A single HTTP header. Unpacks as a (name, value) pair."""

    __slots__ = ()

    def __str__(self):
        return '%s: %s' % (self.name, self.value)
