"""Pydantic models for API request bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys as well as snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileUpdate(CamelModel):
    """Partial profile payload for upserts."""

    height: int | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, gt=0)
    gender: Literal["male", "female", "other"] | None = None
    activity_level: (
        Literal["sedentary", "light", "moderate", "active", "very_active"] | None
    ) = None
    dietary_goals: Literal["lose_weight", "maintain", "gain_muscle"] | None = None
    dietary_restrictions: str | None = None
    subscription_tier: Literal["free", "premium"] | None = None


class TierChange(BaseModel):
    """Subscription tier change request."""

    tier: Literal["free", "premium"]


class FoodSelection(CamelModel):
    """One food picked for a meal."""

    food_id: int
    quantity_g: float = Field(alias="quantity_g")


class MealCreate(CamelModel):
    """Meal log creation payload."""

    date: str
    meal_type: str
    food_items: list[FoodSelection]
    total_calories: int | None = None


class ReminderCreate(CamelModel):
    """Reminder creation payload."""

    time: str
    type: str
    message: str
    is_active: bool = True


class ReminderUpdate(CamelModel):
    """Partial reminder update payload."""

    time: str | None = None
    type: str | None = None
    message: str | None = None
    is_active: bool | None = None


class CoachMessage(BaseModel):
    """User question for the coach."""

    content: str


class FoodCreate(CamelModel):
    """Catalog entry payload for admin endpoints."""

    name: str
    category: str | None = None
    calories: int = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float | None = Field(default=None, ge=0)
    vitamin_a: float | None = Field(default=None, ge=0, alias="vitaminA")
    iron: float | None = Field(default=None, ge=0)
    is_kenya_specific: bool = False


class FoodUpdate(CamelModel):
    """Partial catalog entry payload for admin endpoints."""

    name: str | None = None
    category: str | None = None
    calories: int | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    vitamin_a: float | None = Field(default=None, ge=0, alias="vitaminA")
    iron: float | None = Field(default=None, ge=0)
    is_kenya_specific: bool | None = None
