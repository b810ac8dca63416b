import logging

from .errors import InvalidConfiguration
from .header_collection import HeaderCollector
from .method import default_method
from .request import Request

logger = logging.getLogger(__name__)


class RequestBuilder(object):
    """
    Mutable draft of a Request. Assign uri, method and body directly, add
    headers through the headers method, then call build.
    """

    def __init__(self):
        self.uri = ''
        self.method = default_method
        self.body = None
        self._headers = []

    def headers(self, configure):
        """
        Call configure with a fresh HeaderCollector and append everything it
        collected to this builder's headers. Headers from repeated calls
        accumulate in call order.
        """
        collector = HeaderCollector()
        configure(collector)
        logger.debug('collected %i header(s)', len(collector))
        self._headers.extend(collector)
        return self

    def build(self):
        """Return a new Request from the current state of the builder.

        Raises InvalidConfiguration if the uri is empty or blank, or if the
        method is not an HttpMethod. The builder itself is left unchanged, so
        it may be fixed up and built again."""
        try:
            request = Request(self.uri, self.method, self.body,
                              list(self._headers))
        except InvalidConfiguration as e:
            logger.debug('build failed: %s', e)
            raise
        logger.debug('built %s request for %s with %i header(s)',
                     request.method, request.uri, len(request.headers))
        return request

    def __repr__(self):
        return ('RequestBuilder(uri=%r, method=%r, body=%r, headers=%r)' %
                (self.uri, self.method, self.body, self._headers))
