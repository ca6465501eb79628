from src.exceptions.orchestration.orchestration_service_error import OrchestrationServiceError


class CityNotExtractedError(OrchestrationServiceError):
    """Exception raised when the extracted city name is empty."""

    pass
