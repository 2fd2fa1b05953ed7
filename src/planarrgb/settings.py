"""Process-wide configuration for the packing backends."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

BackendChoice = Literal["auto", "numpy", "python"]


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    backend: BackendChoice = "auto"
    """Backend used when none is passed explicitly. "auto" picks one from the image size."""

    numpy_threshold: int = Field(default=4096, ge=0)
    """Minimum pixel count for which "auto" selects the numpy backend."""


class SettingsManager:
    global_settings: ClassVar[Settings] = Settings()

    @classmethod
    def load(cls, raw: Mapping[str, Any]) -> Settings:
        """
        Validate a raw mapping and install it as the global settings.

        Args:
            raw: Mapping of setting names to values. Missing keys keep their defaults.

        Returns:
            The newly installed settings.

        Raises:
            pydantic.ValidationError: If a value is invalid or a key is unknown.
        """
        cls.global_settings = Settings.model_validate(dict(raw))
        return cls.global_settings

    @classmethod
    def reset(cls) -> None:
        cls.global_settings = Settings()
