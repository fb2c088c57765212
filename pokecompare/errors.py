from fastapi import HTTPException, status

NOT_FOUND_MESSAGE = "Pokémon not found"


# Internal failures raised by the upstream client and the normalizer.
# They never reach the API consumer directly; the service collapses them.
class UpstreamError(Exception):
    def __init__(self, identifier, detail: str):
        super().__init__(detail)
        self.identifier = identifier
        self.detail = detail


class UpstreamNotFound(UpstreamError):
    pass


class UpstreamUnavailable(UpstreamError):
    pass


class MalformedUpstreamPayload(UpstreamError):
    pass


class PokemonNotFound(HTTPException):
    """Public 404. `reason` keeps the internal error kind for logs and tests."""

    def __init__(self, identifier, reason: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
        self.identifier = identifier
        self.reason = reason
