import enum


class HttpMethod(str, enum.Enum):
    """The HTTP methods a Request may carry."""
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    PATCH = 'PATCH'
    HEAD = 'HEAD'
    OPTIONS = 'OPTIONS'

    def __str__(self):
        return self.value


# The method a RequestBuilder starts out with.
default_method = HttpMethod.GET
