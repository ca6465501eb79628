from agent.base_agent import ChatAgent, create_chat_client
from agent.city_extractor import CityExtractor
from agent.response_composer import ResponseComposer

__all__ = ["ChatAgent", "CityExtractor", "ResponseComposer", "create_chat_client"]
