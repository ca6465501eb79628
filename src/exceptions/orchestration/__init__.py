from src.exceptions.orchestration.city_not_extracted_error import CityNotExtractedError
from src.exceptions.orchestration.orchestration_service_error import OrchestrationServiceError

__all__ = ["OrchestrationServiceError", "CityNotExtractedError"]
