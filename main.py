import asyncio
import sys

import structlog

from src.config.config import Config, load_config
from src.exceptions import CityNotExtractedError, ConfigError, WeatherBotError
from src.services.orchestration_service import OrchestrationService
from src.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)


async def answer_question(config: Config, user_query: str) -> str:
    """Run one question through the pipeline and release its clients."""
    service = OrchestrationService(config)
    try:
        return await service.process_query(user_query)
    finally:
        await service.aclose()


def main() -> int:
    """
    Read one weather question from stdin and print the answer.

    Returns:
        Process exit code: 0 when an answer was printed, 1 otherwise
    """
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    try:
        setup_logging(config)
    except Exception as e:
        print(f"Error setting up logging: {e}")
        return 1

    logger.info("Starting Weather Bot", environment=config.environment, model=config.mistral_model)

    print("Ask about the weather")
    line = sys.stdin.readline()
    if not line:
        print("No question provided")
        return 1
    user_query = line.rstrip("\r\n")

    try:
        answer = asyncio.run(answer_question(config, user_query))
    except CityNotExtractedError as e:
        print(str(e))
        return 1
    except WeatherBotError as e:
        print(f"Error {e.stage or 'processing query'}: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Query interrupted")
        return 1
    except Exception as e:
        logger.error("Query failed", error=str(e), exc_info=True)
        print(f"Error processing query: {e}")
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
