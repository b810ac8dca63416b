class InvalidConfiguration(ValueError):
    """Raised by RequestBuilder.build when the configured request is not
    usable, e.g. the uri was never set."""
