from __future__ import annotations

# Rows are sampled once per minute; one window summarizes this many rows.
WINDOW_SIZE_MINUTES: float = 2.5

MINUTES_PER_DAY: int = 1440
# Lights are off for the first 12 hours of every day.
LIGHTS_OFF_MINUTES: int = 720

ESTRUS_CYCLE_DAYS: int = 4
ESTRUS_DAY_OFFSET: int = 2

SUBJECTS_PER_SEX: int = 13
FEMALE_TEMP_COLUMNS: list[str] = [
    f"fem_temp_{i}" for i in range(1, SUBJECTS_PER_SEX + 1)
]
MALE_TEMP_COLUMNS: list[str] = [
    f"male_temp_{i}" for i in range(1, SUBJECTS_PER_SEX + 1)
]

COHORTS: tuple[str, ...] = ("female", "male", "both")
DEFAULT_COHORT: str = "both"

UNITS: tuple[str, ...] = ("C", "F")
DEFAULT_UNIT: str = "C"

# Chart styling
LINE_COLOR: str = "#1976d2"
DARK_BAND_COLOR: str = "rgba(0,0,0,0.08)"
ESTRUS_BAND_COLOR: str = "rgba(233,30,99,0.15)"
SELECTION_COLOR: str = "rgba(25,118,210,0.15)"
DEFAULT_CHART_HEIGHT: int = 500
