"""AI nutrition coach backed by a text generation service."""

import json
import logging
import re
from collections.abc import AsyncIterator
from dataclasses import asdict, dataclass
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from lishe.domain.coach import CoachAnalysis
from lishe.domain.meals import LoggedMeal
from lishe.errors import UpstreamError, ValidationError
from lishe.services.catalog import CatalogService
from lishe.services.meals import MealLogService
from lishe.services.profiles import ProfileService

_logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

FALLBACK_SCORE = 50
ANALYSIS_UNAVAILABLE = "Analysis is unavailable right now. Please try again later."
STREAM_INTERRUPTED = "\n\n[The coach was interrupted. Please try again.]"


class TextGenerator(Protocol):
    """Interface for a generative text service."""

    async def generate(self, prompt: str) -> str:
        """Return the full reply for a prompt."""

    def generate_stream(self, prompt: str) -> AsyncIterator[str]:
        """Return a single-use iterator over reply chunks."""


@dataclass
class CoachService:
    """Builds coaching prompts and relays the generator's replies."""

    generator: TextGenerator
    profile_service: ProfileService
    meal_log_service: MealLogService
    catalog_service: CatalogService
    recent_meals: int = 5

    async def analyze(self, user_id: UUID) -> CoachAnalysis:
        """Return a structured analysis, degrading on bad upstream output."""
        prompt = self.build_analysis_prompt(user_id)
        try:
            text = await self.generator.generate(prompt)
        except UpstreamError:
            _logger.exception("Coach analysis failed", extra={"user_id": str(user_id)})
            return fallback_analysis(ANALYSIS_UNAVAILABLE)
        return parse_analysis(text)

    def chat(self, user_id: UUID, question: str) -> AsyncIterator[str]:
        """Return a stream of reply chunks for a user question."""
        cleaned = question.strip()
        if not cleaned:
            raise ValidationError("content must not be empty", "content")
        return self._relay(user_id, self.build_chat_prompt(user_id, cleaned))

    def build_analysis_prompt(self, user_id: UUID) -> str:
        """Embed the profile, recent meals and local foods in the analysis prompt."""
        profile = self.profile_service.get_profile(user_id)
        meals = self.meal_log_service.list_recent(user_id, self.recent_meals)
        local_foods = [
            asdict(food)
            for food in self.catalog_service.search()
            if food.is_kenya_specific
        ]
        return (
            "Analyze the following nutrition data for a person in Kenya.\n\n"
            f"User Profile: {_to_json(asdict(profile) if profile else None)}\n"
            f"Recent Meals: {_to_json([_meal_context(meal) for meal in meals])}\n"
            f"Available Kenyan Foods: {_to_json(local_foods)}\n\n"
            "Provide a health analysis including:\n"
            "1. Nutritional balance assessment based on the Kenyan context.\n"
            "2. Specific recommendations for improvement using local foods.\n"
            "3. Potential risks or missing nutrients (like iron, vitamin A).\n\n"
            'Return the analysis as a JSON object with fields "summary", '
            '"recommendations" (array of strings) and "score" (0-100).'
        )

    def build_chat_prompt(self, user_id: UUID, question: str) -> str:
        """Embed the goal and recent meals ahead of the user question."""
        profile = self.profile_service.get_profile(user_id)
        goal = profile.dietary_goals if profile and profile.dietary_goals else None
        meals = self.meal_log_service.list_recent(user_id, self.recent_meals)
        return (
            "You are a friendly nutrition coach for a user in Kenya.\n"
            f"Goal: {goal or 'improve overall health'}\n"
            f"Recent Meals: {_to_json([_meal_context(meal) for meal in meals])}\n"
            f"Question: {question}"
        )

    async def _relay(self, user_id: UUID, prompt: str) -> AsyncIterator[str]:
        try:
            async for chunk in self.generator.generate_stream(prompt):
                yield chunk
        except UpstreamError:
            _logger.exception("Coach stream failed", extra={"user_id": str(user_id)})
            yield STREAM_INTERRUPTED


def parse_analysis(text: str) -> CoachAnalysis:
    """Parse a JSON analysis from model output, falling back to the raw text."""
    match = _JSON_OBJECT.search(text)
    candidate = match.group(0) if match else text
    try:
        return CoachAnalysis.model_validate(json.loads(candidate))
    except (json.JSONDecodeError, PydanticValidationError):
        _logger.warning("Coach returned an unparseable analysis")
        return fallback_analysis(text)


def fallback_analysis(summary: str) -> CoachAnalysis:
    """Return the neutral analysis used when the reply cannot be parsed."""
    return CoachAnalysis(summary=summary, recommendations=[], score=FALLBACK_SCORE)


def _meal_context(meal: LoggedMeal) -> dict[str, object]:
    return {
        "date": meal.date.isoformat(),
        "mealType": meal.meal_type,
        "totalCalories": meal.total_calories,
        "items": [
            {"name": entry.name, "quantity_g": entry.quantity_g}
            for entry in meal.food_items
        ],
    }


def _to_json(value: object) -> str:
    return json.dumps(value, default=str)
