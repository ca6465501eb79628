from src.exceptions.language_model.language_model_error import LanguageModelError


class LanguageModelRequestError(LanguageModelError):
    """Exception for transport or API errors raised by the chat completion client."""

    pass
