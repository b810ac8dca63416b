import collections

from .errors import InvalidConfiguration
from .header_collection import Headers
from .method import HttpMethod, default_method


def _method_from(method):
    if isinstance(method, HttpMethod):
        return method
    if isinstance(method, str):
        try:
            return HttpMethod(method)
        except ValueError:
            pass
    raise InvalidConfiguration('Unsupported HTTP method: %r' % (method,))


class Request(collections.namedtuple('Request',
                                     ['uri', 'method', 'body', 'headers'])):
    """
    A finished HTTP request description: uri, method, optional body, and an
    ordered Headers sequence. Requests are immutable and compare by value.

    The uri must be a non-blank string and the method must be an HttpMethod
    (or the name of one). Anything else raises InvalidConfiguration.
    """

    __slots__ = ()

    def __new__(cls, uri, method=default_method, body=None, headers=()):
        if not isinstance(uri, str) or not uri.strip():
            raise InvalidConfiguration(
                'URI must be set for an HTTP request, got %r' % (uri,))
        return super(Request, cls).__new__(cls, uri, _method_from(method),
                                           body, Headers(headers))

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def _replace(self, **changes):
        fields = self._asdict()
        fields.update(changes)
        return type(self)(**fields)

    def __str__(self):
        lines = ['%s %s HTTP/1.1' % (self.method, self.uri)]
        for header in self.headers:
            lines.append(str(header))
        lines.append('')
        if self.body is not None and len(self.body) > 0:
            lines.append(self.body)
        return '\n'.join(lines)

    def __repr__(self):
        return ('Request(uri=%r, method=HttpMethod.%s, body=%r, headers=%r)' %
                (self.uri, self.method.name, self.body, list(self.headers)))
