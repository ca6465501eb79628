from contextlib import contextmanager
from datetime import datetime
from typing import Optional

import httpx
import structlog
from openai import AsyncOpenAI

from agent.base_agent import create_chat_client
from agent.city_extractor import CityExtractor
from agent.response_composer import ResponseComposer
from src.config.config import Config
from src.exceptions import CityNotExtractedError, WeatherBotError
from src.services.weather_service import WeatherService

logger = structlog.get_logger(__name__)

STAGE_EXTRACT = "extracting city"
STAGE_FETCH = "fetching weather data"
STAGE_COMPOSE = "generating response"


@contextmanager
def _stage(name: str):
    """Tag any weather bot error raised inside the block with the stage name."""
    try:
        yield
    except WeatherBotError as e:
        if e.stage is None:
            e.stage = name
        logger.error("Pipeline stage failed", stage=name, error_type=type(e).__name__, error=str(e))
        raise


class OrchestrationService:
    """
    Runs a weather question through the three pipeline stages.

    Stages run strictly in order: city extraction, weather fetch, answer
    composition. Any failure aborts the remaining stages and is raised to the
    caller with its ``stage`` set.
    """

    def __init__(
            self,
            config: Config,
            llm_client: Optional[AsyncOpenAI] = None,
            http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the orchestration service."""
        self._llm_client = llm_client or create_chat_client(config)
        self.city_extractor = CityExtractor(config, client=self._llm_client)
        self.weather_service = WeatherService(config, client=http_client)
        self.response_composer = ResponseComposer(config, client=self._llm_client)

        logger.info("Orchestration service initialized", model=config.mistral_model)

    async def process_query(self, user_query: str) -> str:
        """
        Answer a natural language weather question.

        Args:
            user_query: The raw question as typed by the user.

        Returns:
            The composed answer.

        Raises:
            CityNotExtractedError: If the model quoted an empty city name.
            WeatherBotError: Any stage failure, with ``stage`` set.
        """
        start_time = datetime.now()
        logger.info("Processing weather query", query=user_query, query_length=len(user_query))

        with _stage(STAGE_EXTRACT):
            city = await self.city_extractor.extract_city(user_query)

        if not city:
            logger.warning("Empty city extracted", query=user_query)
            raise CityNotExtractedError("Could not extract city from your input")

        with _stage(STAGE_FETCH):
            snapshot = await self.weather_service.fetch_weather(city)

        with _stage(STAGE_COMPOSE):
            answer = await self.response_composer.compose_answer(user_query, snapshot)

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            "Weather query processed successfully",
            city=city,
            processing_time=processing_time,
            response_length=len(answer),
        )
        return answer

    async def aclose(self):
        """Close the shared chat completion client."""
        await self._llm_client.close()
