class MalformedResponse(ValueError):
    """Top-level document is neither a JSON object nor an array."""


class InvalidAddress(ValueError):
    pass
