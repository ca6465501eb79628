from src.exceptions.language_model.language_model_error import LanguageModelError


class EmptyResponseError(LanguageModelError):
    """Exception raised when the service returns zero response choices."""

    pass
