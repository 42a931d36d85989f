"""OpenAI Responses API client for coaching replies."""

from collections.abc import AsyncIterator
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from lishe.errors import UpstreamError
from lishe.services.coach import TextGenerator

_DELTA_EVENT = "response.output_text.delta"
_FAILURE_EVENTS = {"error", "response.failed"}


@dataclass
class OpenAITextClient(TextGenerator):
    """Text generator backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    store: bool = False

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        base_url: str | None = None,
        store: bool = False,
    ) -> "OpenAITextClient":
        """Create a text client, optionally for an OpenAI-compatible gateway."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, base_url=base_url),
            model=model,
            store=store,
        )

    async def generate(self, prompt: str) -> str:
        """Return the complete reply text."""
        try:
            response = await self.client.responses.create(
                model=self.model, input=prompt, store=self.store
            )
        except OpenAIError as exc:
            raise UpstreamError("Text generation failed") from exc
        output_text = response.output_text
        if not output_text:
            raise UpstreamError("OpenAI returned an empty response")
        return output_text

    async def generate_stream(self, prompt: str) -> AsyncIterator[str]:
        """Yield reply text deltas as they arrive."""
        try:
            stream = await self.client.responses.create(
                model=self.model, input=prompt, store=self.store, stream=True
            )
            async for event in stream:
                if event.type == _DELTA_EVENT:
                    yield event.delta
                elif event.type in _FAILURE_EVENTS:
                    raise UpstreamError("Text generation stream failed")
        except OpenAIError as exc:
            raise UpstreamError("Text generation stream failed") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
