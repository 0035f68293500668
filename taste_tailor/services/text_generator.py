"""Text generation client built on Azure OpenAI agents."""

import json
import logging
from typing import TypeVar

from azure.identity import AzureCliCredential
from agent_framework.azure import AzureOpenAIResponsesClient
from pydantic import BaseModel

from ..config import PipelineConfig
from ..utils.text import strip_code_fences


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


STRUCTURED_OUTPUT_INSTRUCTIONS = """{system}

Respond with a single JSON object that conforms to this JSON schema:
{schema}

Return ONLY the JSON object, no explanation and no markdown formatting."""


class TextGenerator:
    """Runs persona agents for plain-text and schema-validated generation.

    One agent is created lazily per (name, deployment, instructions) and reused
    across requests.
    """

    def __init__(self, config: PipelineConfig):
        self.config = config
        self._clients: dict[str, AzureOpenAIResponsesClient] = {}
        self._agents: dict[tuple[str, str, str], object] = {}

    def _get_client(self, deployment: str) -> AzureOpenAIResponsesClient:
        """Lazy init for the per-deployment Azure client."""
        if deployment not in self._clients:
            if self.config.azure_openai_api_key:
                self._clients[deployment] = AzureOpenAIResponsesClient(
                    endpoint=self.config.azure_openai_endpoint,
                    deployment_name=deployment,
                    api_key=self.config.azure_openai_api_key,
                )
            else:
                self._clients[deployment] = AzureOpenAIResponsesClient(
                    endpoint=self.config.azure_openai_endpoint,
                    deployment_name=deployment,
                    credential=AzureCliCredential(),
                )
        return self._clients[deployment]

    def _get_agent(self, name: str, instructions: str, deployment: str):
        """Lazy init for a named agent."""
        key = (name, deployment, instructions)
        if key not in self._agents:
            self._agents[key] = self._get_client(deployment).as_agent(
                name=name,
                instructions=instructions,
            )
        return self._agents[key]

    async def _run(self, agent, prompt: str) -> str:
        response = await agent.run(prompt)

        # Extract response text
        text = ""
        for msg in response.messages:
            for content in msg.contents:
                if hasattr(content, "text") and content.text:
                    text += content.text
        return text

    async def generate_text(
        self,
        *,
        name: str,
        prompt: str,
        system: str,
        deployment: str | None = None,
    ) -> str:
        """Generate free text with the given persona."""
        deployment = deployment or self.config.text.deployment
        agent = self._get_agent(name, system, deployment)
        return await self._run(agent, prompt)

    async def generate_object(
        self,
        schema: type[SchemaT],
        *,
        name: str,
        prompt: str,
        system: str,
    ) -> SchemaT:
        """Generate a JSON object and validate it against ``schema``.

        Raises:
            pydantic.ValidationError: The model output did not match the schema
                (including output that is not JSON at all).
        """
        instructions = STRUCTURED_OUTPUT_INSTRUCTIONS.format(
            system=system,
            schema=json.dumps(schema.model_json_schema(), indent=2),
        )
        agent = self._get_agent(name, instructions, self.config.text.deployment)
        text = await self._run(agent, prompt)
        logger.debug("%s returned %d characters", name, len(text))
        return schema.model_validate_json(strip_code_fences(text))
