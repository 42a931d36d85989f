"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from lishe.adapters.openai_text_client import OpenAITextClient
from lishe.adapters.supabase_auth_gateway import SupabaseAuthGateway
from lishe.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from lishe.adapters.supabase_meal_log_repository import SupabaseMealLogRepository
from lishe.adapters.supabase_profile_repository import SupabaseProfileRepository
from lishe.adapters.supabase_reminder_repository import SupabaseReminderRepository
from lishe.config import Settings
from lishe.services.auth import AuthService
from lishe.services.catalog import CatalogService
from lishe.services.coach import CoachService
from lishe.services.meals import MealLogService
from lishe.services.profiles import ProfileService
from lishe.services.reminders import ReminderService
from lishe.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    catalog_service: CatalogService
    profile_service: ProfileService
    meal_log_service: MealLogService
    summary_service: SummaryService
    reminder_service: ReminderService
    coach_service: CoachService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_service = CatalogService(SupabaseCatalogRepository(supabase_client))
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    meal_log_service = MealLogService(
        catalog_service=catalog_service,
        repository=SupabaseMealLogRepository(supabase_client),
        timezone_name=resolved_settings.meal_day_timezone,
    )
    text_client = OpenAITextClient.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        base_url=resolved_settings.openai_base_url,
        store=resolved_settings.openai_store,
    )
    coach_service = CoachService(
        generator=text_client,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        catalog_service=catalog_service,
        recent_meals=resolved_settings.coach_recent_meals,
    )

    async def close_resources() -> None:
        await text_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseAuthGateway(supabase_client)),
        catalog_service=catalog_service,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        summary_service=SummaryService(
            meal_log_service=meal_log_service,
            profile_service=profile_service,
        ),
        reminder_service=ReminderService(SupabaseReminderRepository(supabase_client)),
        coach_service=coach_service,
        close_resources=close_resources,
    )
