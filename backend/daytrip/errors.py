"""Exception types for itinerary planning.

Fatal errors abort the request and reach the caller. Provider errors are
raised by adapters and always absorbed into fallback values by the
enrichment and routing stages.
"""


class PlanningError(Exception):
    """Base error for the itinerary pipeline."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Fatal: no itinerary is produced
class FatalPlanningError(PlanningError):
    """Request cannot be planned at all."""

    pass


class InvalidInput(FatalPlanningError):
    """Prompt is empty."""

    pass


class LanguageServiceError(FatalPlanningError):
    """Language-understanding call failed or is not configured."""

    pass


class UpstreamParseError(FatalPlanningError):
    """Language service reply is not a decodable intent object."""

    pass


class IncompleteIntent(FatalPlanningError):
    """Decoded intent is missing city, destinations or endTime."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Intent is missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields


# Degradable: converted to fallbacks by the caller
class ProviderError(PlanningError):
    """External data provider call failed."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ProviderResponseError(ProviderError):
    """Provider answered with a payload of unexpected shape."""

    pass
