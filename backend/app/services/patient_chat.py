"""LLM service that voices the roleplayed patient.

Talks to Gemini through its OpenAI-compatible endpoint using the OpenAI SDK,
so any OpenAI-compatible provider can be swapped in via settings.
"""

import logging
import time

from openai import AsyncOpenAI

from app.config import settings
from app.services.roleplay_prompt import build_patient_input

logger = logging.getLogger(__name__)

# Short answers are enough for a patient (max 2 sentences plus tags)
DEFAULT_MAX_OUTPUT_TOKENS = 1024


class PatientChatService:
    """Generates the patient's reply to a doctor's question.

    Example:
        service = PatientChatService()
        try:
            answer = await service.generate_reply(prompt, "Sakitnya sejak kapan?")
        finally:
            await service.close()
    """

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ):
        """Initialize PatientChatService.

        Args:
            client: Optional pre-configured AsyncOpenAI client (for testing).
                   If not provided, creates one from settings.
            model: Model name. Defaults to settings.llm_model.
            max_output_tokens: Maximum tokens in the reply.

        Raises:
            ValueError: If no client provided and GEMINI_API_KEY is not configured.
        """
        if client is not None:
            self._client = client
        else:
            if not settings.gemini_api_key:
                raise ValueError(
                    "GEMINI_API_KEY environment variable is required. "
                    "Set it in your .env file or environment."
                )
            self._client = AsyncOpenAI(
                api_key=settings.gemini_api_key,
                base_url=settings.llm_base_url,
            )

        self._model = model or settings.llm_model
        self._max_output_tokens = max_output_tokens

    async def close(self) -> None:
        """Close the client connection."""
        await self._client.close()

    async def generate_reply(self, system_prompt: str, question: str) -> str:
        """Ask the patient a question.

        The roleplay prompt and question are sent as a single user turn.

        Returns:
            The patient's answer, including any anamnesis tags.

        Raises:
            RuntimeError: If the model returns no text.
        """
        start = time.monotonic()
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": build_patient_input(system_prompt, question)}],
            max_tokens=self._max_output_tokens,
        )
        elapsed = time.monotonic() - start

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise RuntimeError("Empty response from patient model")

        logger.info("Patient reply generated in %.2fs (model=%s)", elapsed, self._model)
        return content.strip()
