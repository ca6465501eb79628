from typing import List, Optional

import openai
import structlog
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion, ChatCompletionMessageParam

from src.config.config import Config
from src.exceptions.language_model import EmptyResponseError, LanguageModelRequestError
from src.utils.deadline import run_with_deadline

logger = structlog.get_logger(__name__)


def create_chat_client(config: Config) -> AsyncOpenAI:
    """
    Create the chat completion client used by the agents.

    The client targets Mistral's OpenAI-compatible endpoint. SDK retries are
    disabled: every agent call is a single attempt.
    """
    return AsyncOpenAI(
        api_key=config.mistral_api_key,
        base_url=config.mistral_base_url,
        max_retries=0,
    )


class ChatAgent:
    """
    Base class for pipeline stages backed by a single chat completion.

    Subclasses build the message list; this class sends it once, races the
    call against the configured deadline and returns the first choice's text.
    """

    name = "chat"

    def __init__(
            self,
            config: Config,
            client: Optional[AsyncOpenAI] = None,
            deadline: Optional[float] = None
    ):
        self._client = client or create_chat_client(config)
        self.model = config.mistral_model
        self.temperature = config.mistral_temperature
        self.max_tokens = config.mistral_max_tokens
        self.deadline = deadline if deadline is not None else config.llm_timeout_seconds

    async def _complete(self, messages: List[ChatCompletionMessageParam]) -> str:
        """Send the messages and return the stripped text of the first choice.

        Raises:
            RequestTimeoutError: If the deadline elapses before the service answers.
            EmptyResponseError: If the service returns no choices.
            LanguageModelRequestError: If the client raises a transport or API error.
        """
        params = {"model": self.model, "messages": messages, "temperature": self.temperature}
        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        logger.debug("Sending chat completion", agent=self.name, model=self.model, message_count=len(messages))

        try:
            response: ChatCompletion = await run_with_deadline(
                self._client.chat.completions.create(**params),
                self.deadline,
                operation=self.name,
            )
        except openai.OpenAIError as e:
            logger.error("Chat completion failed", agent=self.name, error=str(e))
            raise LanguageModelRequestError(f"{self.name} request failed: {str(e)}") from e

        if not response.choices:
            raise EmptyResponseError("no response choices from the language model")

        return (response.choices[0].message.content or "").strip()
