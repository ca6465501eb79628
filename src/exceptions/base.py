from typing import Optional


class WeatherBotError(Exception):
    """Base exception for all weather bot errors.

    ``stage`` is filled in by the orchestrator with the pipeline stage that
    raised the error, so the CLI can tell the user where things went wrong.
    """

    def __init__(self, message: str = "", stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage
