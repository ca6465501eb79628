import structlog

from agent.base_agent import ChatAgent
from src.models.weather.weather import WeatherSnapshot

logger = structlog.get_logger(__name__)

COMPOSER_INSTRUCTIONS = (
    "You are a weather assistant. Use the following weather information to answer "
    "the user's question."
)


class ResponseComposer(ChatAgent):
    """Phrases the final answer from the user's question and the weather snapshot."""

    name = "response_composer"

    async def compose_answer(self, user_query: str, snapshot: WeatherSnapshot) -> str:
        """Answer ``user_query`` grounded in ``snapshot``.

        The snapshot sentence is sent as a second system message after the
        instructions; the model's reply is returned trimmed and otherwise as is.
        """
        answer = await self._complete([
            {"role": "system", "content": COMPOSER_INSTRUCTIONS},
            {"role": "system", "content": snapshot.describe()},
            {"role": "user", "content": user_query},
        ])

        logger.info("Composed answer", city=snapshot.city_name, response_length=len(answer))
        return answer
