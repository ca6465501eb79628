import re

import structlog

from agent.base_agent import ChatAgent
from src.exceptions.language_model import ExtractionFailedError

logger = structlog.get_logger(__name__)

EXTRACTION_INSTRUCTIONS = (
    "You are a weather assistant. Please extract only the city name in the following "
    "sentence and make sure the city is within quotes."
)

# First double-quoted substring; at least one character between the quotes
QUOTED_CITY_PATTERN = re.compile(r'"([^"]+)"', re.IGNORECASE)


def parse_quoted_city(text: str) -> str:
    """Return the first double-quoted substring of ``text``, trimmed.

    The result may be empty when the quotes enclose only whitespace; callers
    decide what to do with an empty city.

    Raises:
        ExtractionFailedError: If the text contains no quoted substring.
    """
    match = QUOTED_CITY_PATTERN.search(text.strip())
    if match is None:
        raise ExtractionFailedError("could not extract city name from the language model response")
    return match.group(1).strip()


class CityExtractor(ChatAgent):
    """Asks the language model which city a weather question is about."""

    name = "city_extractor"

    async def extract_city(self, user_query: str) -> str:
        """
        Extract the city name from a natural language weather question.

        Args:
            user_query: The user's raw question.

        Returns:
            The trimmed city name, possibly empty.
        """
        reply = await self._complete([
            {"role": "system", "content": EXTRACTION_INSTRUCTIONS},
            {"role": "user", "content": user_query},
        ])

        city = parse_quoted_city(reply)
        logger.info("Extracted city", city=city)
        return city
