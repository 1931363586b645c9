"""Domain error taxonomy.  HTTP status mapping lives in ``nearby.api.app``."""


class NearbyError(Exception):
    """Base class for every error the service raises on purpose."""


class PersistenceError(NearbyError):
    """The location store failed to read or write."""


class StoreUnavailable(PersistenceError):
    """A search could not list candidates because the store failed."""


class NotFound(NearbyError):
    """No location exists for the given identifier (or it is malformed)."""


class ProviderUnavailable(NearbyError):
    """The trip-cost provider could not be reached or answered non-2xx."""


class ProviderResponseInvalid(NearbyError):
    """The trip-cost provider answered without the expected cost fields."""


class RequestValidationError(NearbyError):
    """A request body could not be decoded under the strict policy."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid request body: " + "; ".join(problems))
