"""Tests for container wiring."""

import asyncio

from lishe.adapters.openai_text_client import OpenAITextClient
from lishe.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.meal_log_service.timezone_name == "UTC"
    assert isinstance(container.coach_service.generator, OpenAITextClient)
    assert container.coach_service.recent_meals == settings.coach_recent_meals
    asyncio.run(container.close_resources())
