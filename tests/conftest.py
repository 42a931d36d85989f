"""Shared test fixtures."""

import threading
from collections.abc import AsyncIterator
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from lishe.config import Settings
from lishe.containers import AppContainer
from lishe.domain.catalog import FoodItem
from lishe.domain.meals import FoodEntry, LoggedMeal
from lishe.domain.profiles import Profile
from lishe.domain.reminders import Reminder
from lishe.errors import UpstreamError
from lishe.services.auth import AuthGateway, AuthService
from lishe.services.catalog import CatalogRepository, CatalogService
from lishe.services.coach import CoachService, TextGenerator
from lishe.services.meals import MealLogRepository, MealLogService
from lishe.services.profiles import ProfileRepository, ProfileService
from lishe.services.reminders import ReminderRepository, ReminderService
from lishe.services.summary import SummaryService

TEST_TOKEN = "user-token"
OTHER_TOKEN = "other-token"


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory food catalog for tests."""

    foods: dict[int, FoodItem] = field(default_factory=dict)
    next_id: int = 1

    def search_foods(self, term: str | None, category: str | None) -> list[FoodItem]:
        results = []
        for food in sorted(self.foods.values(), key=lambda item: item.id):
            if term and term.lower() not in food.name.lower():
                continue
            if category and food.category != category:
                continue
            results.append(food)
        return results

    def get_foods(self, food_ids: list[int]) -> list[FoodItem]:
        return [self.foods[food_id] for food_id in food_ids if food_id in self.foods]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        food = FoodItem(id=self.next_id, **{"category": None, **payload})
        self.foods[food.id] = food
        self.next_id += 1
        return food

    def update_food(self, food_id: int, payload: dict[str, object]) -> FoodItem | None:
        current = self.foods.get(food_id)
        if current is None:
            return None
        updated = replace(current, **payload)
        self.foods[food_id] = updated
        return updated

    def has_foods(self) -> bool:
        return bool(self.foods)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile store keyed by user id."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock)
    next_id: int = 1

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        with self.lock:
            now = datetime.now(tz=UTC)
            current = self.profiles.get(user_id)
            if current is None:
                current = Profile(
                    id=self.next_id,
                    user_id=user_id,
                    height=None,
                    weight=None,
                    age=None,
                    gender=None,
                    activity_level=None,
                    dietary_goals=None,
                    dietary_restrictions=None,
                    subscription_tier="free",
                    updated_at=None,
                )
                self.next_id += 1
            profile = replace(current, **fields, updated_at=now)
            self.profiles[user_id] = profile
            return profile


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository for tests."""

    meals: dict[int, LoggedMeal] = field(default_factory=dict)
    next_id: int = 1

    def create_meal_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        logged_at: datetime,
        meal_type: str,
        food_items: list[FoodEntry],
        total_calories: int,
    ) -> LoggedMeal:
        meal = LoggedMeal(
            id=self.next_id,
            user_id=user_id,
            date=logged_at,
            meal_type=meal_type,
            food_items=list(food_items),
            total_calories=total_calories,
        )
        self.meals[meal.id] = meal
        self.next_id += 1
        return meal

    def list_meal_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[LoggedMeal]:
        results = [
            meal
            for meal in self.meals.values()
            if meal.user_id == user_id
            and (start is None or meal.date >= start)
            and (end is None or meal.date < end)
        ]
        return sorted(results, key=lambda meal: meal.date, reverse=True)

    def list_recent_meal_logs(self, user_id: UUID, limit: int) -> list[LoggedMeal]:
        return self.list_meal_logs(user_id, None, None)[:limit]

    def delete_meal_log(self, user_id: UUID, meal_id: int) -> bool:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return False
        del self.meals[meal_id]
        return True


@dataclass
class InMemoryReminderRepository(ReminderRepository):
    """In-memory reminder repository for tests."""

    reminders: dict[int, Reminder] = field(default_factory=dict)
    next_id: int = 1

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        return [item for item in self.reminders.values() if item.user_id == user_id]

    def create_reminder(self, user_id: UUID, fields: dict[str, object]) -> Reminder:
        reminder = Reminder(
            id=self.next_id,
            user_id=user_id,
            time=str(fields["time"]),
            type=str(fields["type"]),
            message=str(fields["message"]),
            is_active=bool(fields.get("is_active", True)),
        )
        self.reminders[reminder.id] = reminder
        self.next_id += 1
        return reminder

    def update_reminder(
        self, user_id: UUID, reminder_id: int, fields: dict[str, object]
    ) -> Reminder | None:
        current = self.reminders.get(reminder_id)
        if current is None or current.user_id != user_id:
            return None
        updated = replace(current, **fields)
        self.reminders[reminder_id] = updated
        return updated

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        current = self.reminders.get(reminder_id)
        if current is None or current.user_id != user_id:
            return False
        del self.reminders[reminder_id]
        return True


@dataclass
class FakeTextGenerator(TextGenerator):
    """Fake text generator returning canned replies."""

    reply: str = (
        '{"summary": "Balanced week", "recommendations": ["Add sukuma wiki"], '
        '"score": 78}'
    )
    chunks: list[str] = field(default_factory=lambda: ["Karibu! ", "Eat ", "greens."])
    fail: bool = False
    fail_after: int | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise UpstreamError("generator offline")
        return self.reply

    async def generate_stream(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise UpstreamError("stream dropped")
            yield chunk


@dataclass
class FakeAuthGateway(AuthGateway):
    """Fake identity provider mapping tokens to user ids."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def resolve_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


def build_catalog(*foods: dict[str, object]) -> CatalogService:
    service = CatalogService(InMemoryCatalogRepository())
    for food in foods:
        service.create_food(food)
    return service


UGALI = {
    "name": "Ugali (Maize Meal)",
    "category": "Cereals",
    "calories": 365,
    "protein": 7.0,
    "carbs": 78.0,
    "fat": 1.0,
    "is_kenya_specific": True,
}

SUKUMA_WIKI = {
    "name": "Sukuma Wiki (Collard Greens)",
    "category": "Vegetables",
    "calories": 32,
    "protein": 3.0,
    "carbs": 5.4,
    "fat": 0.7,
    "vitamin_a": 500.0,
    "iron": 1.5,
    "is_kenya_specific": True,
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
        openai_api_key="openai-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def container(
    settings: Settings,
    user_id: UUID,
    other_user_id: UUID,
    text_generator: FakeTextGenerator,
) -> AppContainer:
    catalog_service = CatalogService(InMemoryCatalogRepository())
    catalog_service.seed_defaults()
    profile_service = ProfileService(InMemoryProfileRepository())
    meal_log_service = MealLogService(
        catalog_service=catalog_service,
        repository=InMemoryMealLogRepository(),
        timezone_name=settings.meal_day_timezone,
    )
    coach_service = CoachService(
        generator=text_generator,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        catalog_service=catalog_service,
        recent_meals=settings.coach_recent_meals,
    )
    auth_service = AuthService(
        FakeAuthGateway(tokens={TEST_TOKEN: user_id, OTHER_TOKEN: other_user_id})
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        catalog_service=catalog_service,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        summary_service=SummaryService(
            meal_log_service=meal_log_service,
            profile_service=profile_service,
        ),
        reminder_service=ReminderService(InMemoryReminderRepository()),
        coach_service=coach_service,
        close_resources=close_resources,
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
