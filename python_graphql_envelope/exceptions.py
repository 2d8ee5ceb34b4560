from typing import Optional


class GraphQLEnvelopeError(Exception):
    """Base class for every error raised by this package."""


class ConstructionError(GraphQLEnvelopeError):
    """A request could not be built as asked.

    Raised when a variable is added to an anonymous request that already
    carries its variable, or when a variable value is not representable as JSON.
    """


class DecodeError(GraphQLEnvelopeError):
    """The response body does not match the GraphQL response shape."""

    excerpt_length = 200

    def __init__(self, message: str, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body: Optional[str] = None
        if body is not None:
            self.attach_body(body)

    def attach_body(self, body: str) -> None:
        if len(body) > self.excerpt_length:
            body = body[: self.excerpt_length] + "..."
        self.body = body
