"""Tests for the coaching service."""

import asyncio
from uuid import uuid4

import pytest

from lishe.domain.meals import MealSelection
from lishe.errors import ValidationError
from lishe.services.catalog import CatalogService
from lishe.services.coach import (
    ANALYSIS_UNAVAILABLE,
    STREAM_INTERRUPTED,
    CoachService,
    parse_analysis,
)
from lishe.services.meals import MealLogService
from lishe.services.profiles import ProfileService
from tests.conftest import (
    FakeTextGenerator,
    InMemoryCatalogRepository,
    InMemoryMealLogRepository,
    InMemoryProfileRepository,
)


def _coach(generator: FakeTextGenerator) -> CoachService:
    catalog_service = CatalogService(InMemoryCatalogRepository())
    catalog_service.seed_defaults()
    meal_log_service = MealLogService(
        catalog_service=catalog_service,
        repository=InMemoryMealLogRepository(),
    )
    return CoachService(
        generator=generator,
        profile_service=ProfileService(InMemoryProfileRepository()),
        meal_log_service=meal_log_service,
        catalog_service=catalog_service,
        recent_meals=2,
    )


async def _collect(chunks) -> list[str]:  # type: ignore[no-untyped-def]
    return [chunk async for chunk in chunks]


def test_parse_analysis_reads_plain_json() -> None:
    analysis = parse_analysis(
        '{"summary": "Good", "recommendations": ["More beans"], "score": 81}'
    )

    assert analysis.summary == "Good"
    assert analysis.recommendations == ["More beans"]
    assert analysis.score == 81


def test_parse_analysis_reads_fenced_json() -> None:
    text = '```json\n{"summary": "Fine", "recommendations": [], "score": 64}\n```'

    assert parse_analysis(text).score == 64


@pytest.mark.parametrize(
    "text",
    [
        "Eat more greens.",
        '{"summary": "Half',
        '{"summary": "Odd", "recommendations": [], "score": 150}',
        '{"recommendations": []}',
    ],
)
def test_parse_analysis_falls_back_to_raw_text(text) -> None:
    analysis = parse_analysis(text)

    assert analysis.summary == text
    assert analysis.recommendations == []
    assert analysis.score == 50


def test_analyze_returns_parsed_reply() -> None:
    generator = FakeTextGenerator()
    coach = _coach(generator)

    analysis = asyncio.run(coach.analyze(uuid4()))

    assert analysis.score == 78
    assert analysis.recommendations == ["Add sukuma wiki"]
    assert "Available Kenyan Foods" in generator.prompts[0]
    assert "Ugali (Maize Meal)" in generator.prompts[0]


def test_analyze_degrades_when_generator_fails() -> None:
    coach = _coach(FakeTextGenerator(fail=True))

    analysis = asyncio.run(coach.analyze(uuid4()))

    assert analysis.summary == ANALYSIS_UNAVAILABLE
    assert analysis.score == 50


def test_analysis_prompt_includes_profile_and_recent_meals() -> None:
    coach = _coach(FakeTextGenerator())
    user_id = uuid4()
    coach.profile_service.upsert_profile(user_id, {"dietary_goals": "gain_muscle"})
    for hour in (7, 12, 19):
        coach.meal_log_service.compose(
            user_id, [MealSelection(1, 100)], "snack", f"2024-03-01T{hour:02d}:00:00Z"
        )

    prompt = coach.build_analysis_prompt(user_id)

    assert "gain_muscle" in prompt
    assert "T19:00:00" in prompt
    assert "T12:00:00" in prompt
    assert "T07:00:00" not in prompt


def test_chat_relays_chunks_verbatim() -> None:
    generator = FakeTextGenerator()
    coach = _coach(generator)
    user_id = uuid4()
    coach.profile_service.upsert_profile(user_id, {"dietary_goals": "lose_weight"})

    chunks = asyncio.run(_collect(coach.chat(user_id, " What about chapati? ")))

    assert chunks == ["Karibu! ", "Eat ", "greens."]
    assert "Goal: lose_weight" in generator.prompts[0]
    assert "Question: What about chapati?" in generator.prompts[0]


def test_chat_appends_error_message_when_stream_fails() -> None:
    coach = _coach(FakeTextGenerator(fail_after=2))

    chunks = asyncio.run(_collect(coach.chat(uuid4(), "Hi")))

    assert chunks == ["Karibu! ", "Eat ", STREAM_INTERRUPTED]


def test_chat_rejects_empty_question() -> None:
    generator = FakeTextGenerator()
    coach = _coach(generator)

    with pytest.raises(ValidationError) as excinfo:
        coach.chat(uuid4(), "   ")

    assert excinfo.value.field == "content"
    assert generator.prompts == []
