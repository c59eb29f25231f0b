"""LLM service for OpenAI integration."""

import logging
from typing import Optional

import openai

from ..core.config import Settings, settings as default_settings
from ..core.constants import ErrorConstants, PromptConstants
from ..core.errors import AnalysisError
from ..core.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class LLMServiceFactory:
    """Factory for creating LLM services."""

    @staticmethod
    def create(settings: Optional[Settings] = None) -> "OpenAIService":
        """Create the completion service.

        Build it once per process and share it between requests; it keeps
        no per-request state.
        """
        return OpenAIService(settings or default_settings)


class OpenAIService:
    """OpenAI chat-completion client with a fixed decoding configuration."""

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self.model = settings.openai_model or PromptConstants.DEFAULT_MODEL
        self.temperature = PromptConstants.TEMPERATURE
        self.max_tokens = PromptConstants.MAX_OUTPUT_TOKENS
        self.client = client
        if self.client is None and settings.effective_openai_key:
            self.client = openai.OpenAI(api_key=settings.effective_openai_key)
            logger.info(f"OpenAI service initialized (model={self.model})")
        elif self.client is None:
            logger.warning("OpenAI API key not provided, analysis requests will be rejected")

    @property
    def configured(self) -> bool:
        return self.client is not None

    def chat(self, system: str, user: str, temperature: float, max_tokens: int) -> str:
        """Send one system + user exchange and return the reply text."""
        if not self.configured:
            raise AnalysisError.validation(ErrorConstants.MISSING_API_KEY)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user}
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                timeout=ErrorConstants.REQUEST_TIMEOUT
            )
        except openai.OpenAIError as e:
            logger.error(f"Error analyzing reviews with GPT: {e}")
            raise AnalysisError.upstream_unavailable(ErrorConstants.ANALYSIS_FAILED) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def complete(self, prompt: str, system: str = SYSTEM_PROMPT) -> str:
        """Run the analysis prompt with the service's decoding settings."""
        logger.debug(f"Requesting completion ({len(prompt)} chars, model={self.model})")
        return self.chat(system, prompt, temperature=self.temperature, max_tokens=self.max_tokens)
