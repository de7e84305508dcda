"""Pydantic DTO for saving a user's preference arrays."""

from pydantic import BaseModel, Field


class PreferenceUpdate(BaseModel):
    """Schema for ``PUT /setPreference/{id}`` — unknown keys are forwarded as-is."""

    city_preferences: list[str] | None = Field(
        None, alias="cityPreferences", examples=[["Paris", "Tokyo"]],
    )
    weather_preferences: list[str] | None = Field(
        None, alias="weatherPreferences", examples=[["sunny"]],
    )
    temperature_preferences: list[str] | None = Field(
        None, alias="temperaturePreferences", examples=[["warm"]],
    )

    model_config = {"populate_by_name": True, "extra": "allow"}
