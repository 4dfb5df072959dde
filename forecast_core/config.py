"""Configuration constants for forecast generation and condition evaluation."""
import math

# Forecast horizon
HORIZON_DAYS = 7
HOURLY_STEP_HOURS = 3
HOURS_OF_DAY = tuple(range(0, 24, HOURLY_STEP_HOURS))  # (0, 3, ..., 21)

# Enumerations
DESCRIPTIONS = [
    "Sunny",
    "Partly Cloudy",
    "Cloudy",
    "Light Rain",
    "Showers",
    "Strong Winds",
    "Overcast",
]
WIND_DIRECTIONS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# Beach faces roughly east, so these blow from sea toward land
ONSHORE_DIRECTIONS = {"E", "NE", "SE"}

# Day 0 values are fixed so the landing tile always shows calm-wind styling
DAY_ZERO_WIND_SPEED = 15
DAY_ZERO_WIND_GUST = 20

# Random draw ranges, [low, high)
WIND_SPEED_RANGE = (5, 40)       # km/h
WIND_GUST_EXTRA_RANGE = (0, 10)  # km/h above sustained
TEMP_RANGE = (10, 20)            # degrees C
HUMIDITY_RANGE = (60, 90)        # percent
HOURLY_TEMP_SPREAD = 5           # hourly temp = daily temp - 5 + [0, 10)
HOURLY_WIND_SPREAD = 5           # hourly wind = daily wind - 5 + [0, 10)
HOURLY_GUST_EXTRA_RANGE = (0, 5)

# Tide curve parameters (meters)
TIDE_BASE_HEIGHT_RANGE = (1.0, 1.5)
TIDE_AMPLITUDE_RANGE = (2.0, 3.0)
TIDE_DAY_PHASE_SHIFT = math.pi / 3
TIDE_HIGH_THRESHOLD = 2.5
TIDE_LOW_THRESHOLD = 1.0
TIDE_HEIGHT_DECIMALS = 2

# Tide status labels
HIGH_TIDE = "High Tide"
LOW_TIDE = "Low Tide"
RISING_TIDE = "Rising Tide"
FALLING_TIDE = "Falling Tide"
STABLE_TIDE = "Stable"

# Drone and fishing thresholds (km/h)
DRONE_GUST_NO_GO_THRESHOLD = 40
DRONE_STRONG_FLASH_THRESHOLD = 38
DRONE_WARNING_FLASH_THRESHOLD = 30
DRONE_MAX_SUSTAINED_WIND_SPEED = 35
BAD_ONSHORE_WIND_THRESHOLD = 10
GENERAL_BAD_SUSTAINED_THRESHOLD = 20

# Condition labels
CONDITION_GOOD = "Good"
CONDITION_POOR = "Poor"

# Ideal fishing time labels
IDEAL_FISHING_TIME_GOOD = "Morning window, 7–10 AM"
IDEAL_FISHING_TIME_POOR = "No good window — alternative activity recommended"

# Wind intensity bands for tile styling (upper bounds, inclusive)
WIND_INTENSITY_LOW_MAX = 10
WIND_INTENSITY_MODERATE_MAX = 25
WIND_INTENSITY_HIGH_MAX = 30
