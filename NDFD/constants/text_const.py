# Constants for phrase and icon generation

# Sky cover band upper bounds (% of sky), same octa breaks used for hourly text
SKY_COVER_THRESHOLDS = {
    "clear": 12.5,
    "mostly_clear": 37.5,
    "partly_cloudy": 62.5,
    "mostly_cloudy": 87.5,
}

# Phrases for each sky band, indexed by category 0-4
SKY_PHRASES = {
    "day": ["Sunny", "Mostly Sunny", "Partly Sunny", "Mostly Cloudy", "Cloudy"],
    "night": ["Clear", "Mostly Clear", "Partly Cloudy", "Mostly Cloudy", "Cloudy"],
}
SKY_ICONS = ["skc", "few", "sct", "bkn", "ovc"]

# Sky trend refinement
SKY_TREND_MIN_CATEGORY_CHANGE = 2
SKY_TREND_WIDE_SPAN = 4

# Average sky cover (%) above which showers/thunderstorms use the organized icon
ORGANIZED_SKY_COVER = 60

# PoP gates (%)
POP_THRESHOLDS = {
    "precip": 20,
    "thunder": 10,
}
POP_ICON_MIN = 10
POP_ICON_MAX = 100

# Temperature thresholds (degrees F)
TEMP_THRESHOLDS = {
    "hot": 95,
    "cold": 32,
    "freezing": 32,
}

# Wind thresholds (knots)
WIND_THRESHOLDS = {
    "windy": 25,
    "breezy": 15,
}

# Blustery needs a cold season date and a northerly wind
BLUSTERY_SEASON = {
    "start": (11, 1),
    "end": (3, 31),
}
BLUSTERY_SECTOR = {
    "from": 300,
    "to": 60,
}

# Icons without a PoP suffix
TEMP_ICONS = {"hot": "hot", "cold": "cold"}
WIND_ICONS = {"day": "wind", "night": "nwind"}
