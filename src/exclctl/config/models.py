"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, exclctl.toml only contains overrides.
An empty config defines no exclusions at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from exclctl.domain.calendar import DAY_NAMES
from exclctl.domain.exclusion import DAY_KEYWORD, MARKER

# --- exclctl.toml sections ---


class ExclusionsConfig(BaseModel):
    """[exclusions] section.

    Example::

        [exclusions]
        monday = "<08:00:00 12:00:00-12:45:00 >17:30:00"
        saturday = ">00:00:00"
        rules = ["exc day on 2024-12-28"]

        [exclusions.days]
        2024-12-25 = "off"
    """

    model_config = {"frozen": True}

    monday: str | None = None
    tuesday: str | None = None
    wednesday: str | None = None
    thursday: str | None = None
    friday: str | None = None
    saturday: str | None = None
    sunday: str | None = None
    days: dict[str, Literal["on", "off"]] = Field(default_factory=dict)
    rules: list[str] = Field(default_factory=list)

    def to_lines(self) -> list[str]:
        """Render every configured exclusion as a rule line.

        Order: weekdays (Monday first), then day overrides, then raw rules.
        """
        lines: list[str] = []
        for name in DAY_NAMES:
            blocks = getattr(self, name)
            if blocks and blocks.strip():
                lines.append(f"{MARKER} {name} {blocks.strip()}")
        for day, state in self.days.items():
            lines.append(f"{MARKER} {DAY_KEYWORD} {state} {day}")
        lines.extend(self.rules)
        return lines


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    time_format: str = "%Y-%m-%d %H:%M:%S"
