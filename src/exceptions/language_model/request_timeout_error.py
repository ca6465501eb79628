from src.exceptions.language_model.language_model_error import LanguageModelError


class RequestTimeoutError(LanguageModelError):
    """Exception raised when a chat completion does not finish before its deadline."""

    pass
