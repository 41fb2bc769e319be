import json
import logging
from autogen_agentchat.agents import AssistantAgent
from autogen_ext.models.openai import AzureOpenAIChatCompletionClient
from agents import system_prompts
from backend.app.services.validators import QUESTION_LIST
from shared.config import settings

logger = logging.getLogger(__name__)

async def _azure_client():
    return AzureOpenAIChatCompletionClient(
        azure_deployment=settings.az_deployment,
        model=settings.az_model,
        api_version=settings.az_api_version,
        azure_endpoint=settings.az_endpoint,
        api_key=settings.az_api_key,
    )

def question_generator_system_message() -> str:
    schema = json.dumps(QUESTION_LIST.json_schema(), ensure_ascii=False)
    return system_prompts.QUESTION_GENERATOR_PROMPT.format(schema=schema)

class AgentRegistry:
    def __init__(self):
        self._initialized = False
        self._model_client = None

    async def init(self):
        if self._initialized: return
        self._model_client = await _azure_client()
        self._initialized = True
        logger.info(f"Agent registry initialized: deployment={settings.az_deployment}")

    def question_generator(self) -> AssistantAgent:
        # AssistantAgent keeps its chat history, so each request gets a fresh one
        if not self._initialized:
            raise RuntimeError("Agent registry is not initialized")
        return AssistantAgent(
            name="question_generator",
            model_client=self._model_client,
            system_message=question_generator_system_message(),
            tools=[],
            reflect_on_tool_use=False,
            model_client_stream=False,
        )

    async def close(self):
        if not self._initialized: return
        await self._model_client.close()
        self._model_client = None
        self._initialized = False

agent_registry = AgentRegistry()
