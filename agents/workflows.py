"""
Question-generation workflow over an AutoGen agent.

`QuestionGenerationWorkflow.run(prompt)` makes exactly one call to the
text-generation service and turns its reply into question/answer records:
1) sends the prompt, tagged as expecting a JSON response,
2) decodes the JSON (tolerating a markdown code fence),
3) validates the shape with QuestionSetValidator.

Service failures and non-JSON replies raise GenerationError; JSON of the wrong
shape raises SchemaError. Nothing is retried or cached.
"""
from __future__ import annotations
import json
import logging
from typing import Awaitable, Callable, List, Optional

from backend.app.models.schemas import GenerationRequest, QuestionAnswer
from backend.app.services.agent_registry import agent_registry
from backend.app.services.exceptions import GenerationError, SchemaError
from backend.app.services.langsmith_logger import traceable
from backend.app.services.validators import QuestionSetValidator

logger = logging.getLogger(__name__)

Transport = Callable[[GenerationRequest], Awaitable[str]]


async def agent_transport(request: GenerationRequest) -> str:
    agent = agent_registry.question_generator()
    res = await agent.run(task=request.prompt)
    return str(res.messages[-1].content)


def strip_code_fence(content: str) -> str:
    content = content.strip()
    if content.startswith("```json"):
        content = content[7:]
    elif content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


class QuestionGenerationWorkflow:
    def __init__(self, transport: Optional[Transport] = None):
        self.transport = transport or agent_transport

    @traceable("generate_questions")
    async def run(self, prompt: str) -> List[QuestionAnswer]:
        request = GenerationRequest(prompt=prompt, response_type="json")
        try:
            raw = await self.transport(request)
        except Exception as e:
            logger.error(f"Question generation call failed: {e}")
            raise GenerationError(str(e)) from e

        try:
            payload = json.loads(strip_code_fence(raw))
        except (AttributeError, TypeError, json.JSONDecodeError) as e:
            logger.error(f"Generation service returned non-JSON content (len={len(raw or '')})")
            raise GenerationError(f"Invalid JSON response: {e}") from e

        ok, info = QuestionSetValidator.validate(payload)
        if not ok:
            logger.error(f"Generated payload failed shape validation: {info}")
            raise SchemaError("Generated payload is not a list of question/answer records", info)
        questions = QuestionSetValidator.parse(payload)
        logger.info(f"Generated {len(questions)} question(s)")
        return questions
