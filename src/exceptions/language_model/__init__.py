from src.exceptions.language_model.empty_response_error import EmptyResponseError
from src.exceptions.language_model.extraction_failed_error import ExtractionFailedError
from src.exceptions.language_model.language_model_error import LanguageModelError
from src.exceptions.language_model.language_model_request_error import LanguageModelRequestError
from src.exceptions.language_model.request_timeout_error import RequestTimeoutError

__all__ = [
    "LanguageModelError",
    "LanguageModelRequestError",
    "RequestTimeoutError",
    "EmptyResponseError",
    "ExtractionFailedError",
]
