class SolrCountError(Exception):
    """Base exception for all solrcount errors."""

    def __init__(self, message=None, *args):
        super().__init__(message, *args)
        self.message = message

    def __str__(self):
        return self.message or "A solrcount error occurred."


class BackendUnavailable(SolrCountError):
    """Raised when the backend client cannot be bound or the backend cannot be reached."""

    def __init__(self, message=None, host=None, port=None, *args):
        super().__init__(message, *args)
        self.host = host
        self.port = port

    def __str__(self):
        base_message = super().__str__()
        if self.host and self.port:
            return f"{base_message} (Address: {self.host}, Port: {self.port})"
        return base_message


class BackendQueryRejected(SolrCountError):
    """Raised when the backend refuses a query or answers with something unreadable."""

    def __init__(self, message=None, query=None, *args):
        super().__init__(message, *args)
        self.query = query


class SerializationFailure(SolrCountError):
    """Raised when a result cannot be encoded in the negotiated format."""

    def __init__(self, message=None, media_type=None, *args):
        super().__init__(message, *args)
        self.media_type = media_type

    def __str__(self):
        base_message = super().__str__()
        if self.media_type:
            return f"{base_message} (Format: {self.media_type})"
        return base_message
