from src.exceptions.language_model.language_model_error import LanguageModelError


class ExtractionFailedError(LanguageModelError):
    """Exception raised when no quoted city name is found in the model output."""

    pass
