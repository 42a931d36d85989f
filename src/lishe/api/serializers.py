"""JSON serializers for domain models."""

from lishe.domain.catalog import FoodItem
from lishe.domain.meals import FoodEntry, LoggedMeal
from lishe.domain.profiles import Profile
from lishe.domain.reminders import Reminder
from lishe.domain.summary import DailySummary


def serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "fiber": food.fiber,
        "vitaminA": food.vitamin_a,
        "iron": food.iron,
        "isKenyaSpecific": food.is_kenya_specific,
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "id": profile.id,
        "userId": str(profile.user_id),
        "height": profile.height,
        "weight": profile.weight,
        "age": profile.age,
        "gender": profile.gender,
        "activityLevel": profile.activity_level,
        "dietaryGoals": profile.dietary_goals,
        "dietaryRestrictions": profile.dietary_restrictions,
        "subscriptionTier": profile.subscription_tier,
        "updatedAt": profile.updated_at.isoformat() if profile.updated_at else None,
    }


def _serialize_entry(entry: FoodEntry) -> dict[str, object]:
    return {
        "foodId": entry.food_id,
        "name": entry.name,
        "quantity_g": entry.quantity_g,
        "calories": entry.calories,
        "macros": {
            "protein": entry.macros.protein,
            "carbs": entry.macros.carbs,
            "fat": entry.macros.fat,
        },
    }


def serialize_meal(meal: LoggedMeal) -> dict[str, object]:
    return {
        "id": meal.id,
        "userId": str(meal.user_id),
        "date": meal.date.isoformat(),
        "mealType": meal.meal_type,
        "foodItems": [_serialize_entry(entry) for entry in meal.food_items],
        "totalCalories": meal.total_calories,
    }


def serialize_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "totalCalories": summary.total_calories,
        "protein": summary.protein,
        "carbs": summary.carbs,
        "fat": summary.fat,
        "targetCalories": summary.target_calories,
        "entries": [serialize_meal(meal) for meal in summary.entries],
    }


def serialize_reminder(reminder: Reminder) -> dict[str, object]:
    return {
        "id": reminder.id,
        "userId": str(reminder.user_id),
        "time": reminder.time,
        "type": reminder.type,
        "message": reminder.message,
        "isActive": reminder.is_active,
    }
