#!/usr/bin/env python

import logging


__version_info__ = (0, 1)
__version__ = '.'.join(map(str, __version_info__))


logger = logging.getLogger(__name__)

from .method import HttpMethod, default_method
from .header import Header
from .header_collection import HeaderCollector, Headers
from .request import Request
from .builder import RequestBuilder
from .errors import InvalidConfiguration


def http_request(configure):
    """
    Create a RequestBuilder, pass it to configure, and return the built
    Request. Raises InvalidConfiguration if configure leaves the builder
    without a usable uri or method.

        request = http_request(lambda r: setattr(r, 'uri', 'http://x/'))

    More often configure is a small named function:

        def configure(r):
            r.uri = 'https://api.example.com/users'
            r.method = HttpMethod.POST
            r.headers(lambda h: h('Content-Type').to('application/json'))
            r.body = '{"name":"Jane"}'

        request = http_request(configure)
    """
    logger.debug('')
    builder = RequestBuilder()
    configure(builder)
    return builder.build()
