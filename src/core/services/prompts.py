"""Prompt templates for exercise and diet plan generation."""

import json
from typing import Any

EXERCISE_PLAN_SHAPE = """{
  "title": "Plan title",
  "description": "Brief overview of the plan",
  "exercises": [
    {
      "name": "Exercise name",
      "description": "Description",
      "sets": number,
      "reps": number,
      "duration": number,
      "notes": "Special instructions"
    }
  ]
}"""

DIET_PLAN_SHAPE = """{
  "title": "Plan title",
  "description": "Brief overview of the plan",
  "dailyCalories": number,
  "dietaryRestrictions": ["restriction1", "restriction2"],
  "meals": [
    {
      "name": "Meal name",
      "description": "Description",
      "calories": number,
      "proteins": number,
      "carbs": number,
      "fats": number,
      "recipe": "Simple recipe"
    }
  ]
}"""

_EXERCISE_TEMPLATE = """You are a professional fitness trainer designing a personalized exercise plan.
Please create a structured workout plan based on the following information:

USER PROFILE:
{profile}

QUIZ RESPONSES:
{quiz_responses}
{preferences}
Please create an exercise plan with:
1. A title for the plan
2. A brief description and overview
3. A structured list of exercises, each with:
   - Name
   - Description
   - Sets (if applicable)
   - Reps (if applicable)
   - Duration (in minutes, if applicable)
   - Any special notes or form tips

Format your response as a JSON object strictly following this structure:
{shape}
"""

_DIET_TEMPLATE = """You are a professional nutritionist designing a personalized diet plan.
Please create a structured meal plan based on the following information:

USER PROFILE:
{profile}

QUIZ RESPONSES:
{quiz_responses}
{preferences}
Please create a diet plan with:
1. A title for the plan
2. A brief description and overview
3. Recommended daily calories
4. List of dietary restrictions if applicable
5. A structured list of meals, each with:
   - Name
   - Description
   - Estimated calories
   - Macronutrients (proteins, carbs, fats in grams)
   - Simple recipe or preparation method

Format your response as a JSON object strictly following this structure:
{shape}
"""

NOT_SPECIFIED = "Not specified"


def format_response_data(response_data: str | None) -> str:
    """Pretty-print a JSON quiz answer; anything else is passed through."""
    if not response_data:
        return "Not provided"
    try:
        return json.dumps(json.loads(response_data), indent=2)
    except (TypeError, ValueError):
        return str(response_data)


def format_quiz_responses(quiz_responses: list[dict[str, Any]]) -> str:
    if not quiz_responses:
        return "No quiz responses provided."
    return "\n".join(
        f"- Question: {q.get('questionText') or q.get('questionId')}\n"
        f"  Response: {format_response_data(q.get('responseData'))}"
        for q in quiz_responses
    )


def calculate_bmi(height_cm: float | None, weight_kg: float | None) -> float | None:
    if not height_cm or not weight_kg:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def format_profile(profile: dict[str, Any], include_bmi: bool = False) -> str:
    height = profile.get("height")
    weight = profile.get("weight")
    lines = [
        f"- Age: {profile.get('age') or NOT_SPECIFIED}",
        f"- Gender: {profile.get('gender') or NOT_SPECIFIED}",
        f"- Height: {f'{height} cm' if height else NOT_SPECIFIED}",
        f"- Weight: {f'{weight} kg' if weight else NOT_SPECIFIED}",
    ]
    if include_bmi:
        bmi = calculate_bmi(height, weight)
        if bmi is not None:
            lines.append(f"- BMI: {bmi:.1f}")
    return "\n".join(lines)


def _format_preferences(preferences: dict[str, Any] | None) -> str:
    if not preferences:
        return ""
    return f"\nADDITIONAL PREFERENCES:\n{json.dumps(preferences, indent=2)}\n"


def render_exercise_prompt(
    profile: dict[str, Any],
    quiz_responses: list[dict[str, Any]],
    preferences: dict[str, Any] | None = None,
) -> str:
    return _EXERCISE_TEMPLATE.format(
        profile=format_profile(profile),
        quiz_responses=format_quiz_responses(quiz_responses),
        preferences=_format_preferences(preferences),
        shape=EXERCISE_PLAN_SHAPE,
    )


def render_diet_prompt(
    profile: dict[str, Any],
    quiz_responses: list[dict[str, Any]],
    preferences: dict[str, Any] | None = None,
) -> str:
    return _DIET_TEMPLATE.format(
        profile=format_profile(profile, include_bmi=True),
        quiz_responses=format_quiz_responses(quiz_responses),
        preferences=_format_preferences(preferences),
        shape=DIET_PLAN_SHAPE,
    )
