"""
Constants for NDFD weather ("ugly") strings
"""

# Delimiters of the encoded weather string
GROUP_SEPARATOR = "^"
FIELD_SEPARATOR = ":"
QUALIFIER_SEPARATORS = (",", " ")
FIELDS_PER_GROUP = 5

# Precedence tables, least to most significant
COVERAGE_ORDER = (
    "none",
    "Patchy",
    "Areas",
    "Brf",
    "Inter",
    "Pds",
    "Ocnl",
    "Frq",
    "Iso",
    "SChc",
    "Sct",
    "Chc",
    "Num",
    "Lkly",
    "Wide",
    "Def",
)

INTENSITY_ORDER = (
    "none",
    "--",
    "-",
    "m",
    "+",
)

TYPE_ORDER = (
    "none",
    "FR",
    "H",
    "K",
    "VA",
    "BD",
    "BN",
    "BS",
    "F",
    "IF",
    "ZF",
    "IC",
    "ZY",
    "WP",
    "L",
    "RW",
    "R",
    "SW",
    "S",
    "IP",
    "ZL",
    "ZR",
    "A",
    "T",
)

# Weather types that flag a period for mixture detection
PRESENCE_FLAGS = {
    "L": "drizzle",
    "R": "rain",
    "RW": "rain_showers",
    "S": "snow",
    "SW": "snow_showers",
    "ZL": "freezing_drizzle",
    "ZR": "freezing_rain",
    "IP": "ice_pellets",
}

# Qualifiers that upgrade thunderstorms to severe
SEVERE_QUALIFIERS = ("DmgW", "LgA", "TOR")

# Obstructions fire without a PoP gate: type -> (phrase, day icon, night icon)
OBSTRUCTION_PHRASES = {
    "F": ("Fog", "fg", "nfg"),
    "ZF": ("Freezing Fog", "fg", "nfg"),
    "IF": ("Ice Fog", "fg", "nfg"),
    "BS": ("Blowing Snow", "blizzard", "nblizzard"),
    "BD": ("Blowing Dust", "du", "ndu"),
    "BN": ("Blowing Sand", "du", "ndu"),
    "H": ("Haze", "hazy", "hazy"),
    "IC": ("Ice Crystals", "ip", "nip"),
    "ZY": ("Freezing Spray", "fzra", "nfzra"),
    "K": ("Smoke", "fu", "nfu"),
    "FR": ("Frost", "cold", "ncold"),
    "VA": ("Volcanic Ash", "fu", "nfu"),
    "WP": ("Water Spouts", "tor", "ntor"),
}

# Precipitation gated by PoP: type -> (phrase, day icon, night icon)
PRECIP_PHRASES = {
    "IP": ("Sleet", "ip", "nip"),
    "R": ("Rain", "ra", "nra"),
    "L": ("Drizzle", "ra1", "nra1"),
    "ZL": ("Freezing Drizzle", "fzra", "nfzra"),
    "ZR": ("Freezing Rain", "fzra", "nfzra"),
    "SW": ("Snow Showers", "sn", "nsn"),
    "S": ("Snow", "sn", "nsn"),
    "A": ("Hail", "ip", "nip"),
}
FLURRIES_PHRASE = ("Flurries", "sn", "nsn")

# Shower icons: organized (sky above threshold) vs scattered
SHOWER_PHRASE = "Rain Showers"
SHOWER_ICONS = {
    "organized": ("hi_shwrs", "hi_nshwrs"),
    "scattered": ("shra", "nshra"),
}

THUNDER_PHRASE = "Thunderstorms"
SEVERE_THUNDER_PHRASE = "Severe Tstms"
THUNDER_ICONS = {
    "organized": ("tsra", "ntsra"),
    "scattered": ("scttsra", "nscttsra"),
}

# Mixture families built from the presence flags
MIXTURE_FAMILIES = {
    "rain": ("rain", "rain_showers", "drizzle"),
    "snow": ("snow", "snow_showers"),
    "freezing": ("freezing_rain", "freezing_drizzle"),
    "sleet": ("ice_pellets",),
}

# Two-family mixtures: sorted family pair -> (phrase, icon)
MIXTURE_PHRASES = {
    ("rain", "snow"): ("Rain/Snow", "ra_sn"),
    ("rain", "sleet"): ("Rain/Sleet", "raip"),
    ("freezing", "rain"): ("Rain/Freezing Rain", "ra_fzra"),
    ("freezing", "snow"): ("Freezing Rain/Snow", "fzra_sn"),
    ("sleet", "snow"): ("Snow/Sleet", "ip_sn"),
    ("freezing", "sleet"): ("Freezing Rain/Sleet", "fzra_ip"),
}
WINTRY_MIX = ("Wintry Mix", "mix")

# English translations of the weather codes
COVERAGE_TEXT = {
    "none": "",
    "Patchy": "Patchy",
    "Areas": "Areas Of",
    "Brf": "Brief",
    "Inter": "Intermittent",
    "Pds": "Periods Of",
    "Ocnl": "Occasional",
    "Frq": "Frequent",
    "Iso": "Isolated",
    "SChc": "Slight Chance",
    "Sct": "Scattered",
    "Chc": "Chance",
    "Num": "Numerous",
    "Lkly": "Likely",
    "Wide": "Widespread",
    "Def": "Definite",
}

INTENSITY_TEXT = {
    "none": "",
    "--": "Very Light",
    "-": "Light",
    "m": "Moderate",
    "+": "Heavy",
}

TYPE_TEXT = {
    "none": "No Weather",
    "A": "Hail",
    "BD": "Blowing Dust",
    "BN": "Blowing Sand",
    "BS": "Blowing Snow",
    "F": "Fog",
    "FR": "Frost",
    "H": "Haze",
    "IC": "Ice Crystals",
    "IF": "Ice Fog",
    "IP": "Sleet",
    "K": "Smoke",
    "L": "Drizzle",
    "R": "Rain",
    "RW": "Rain Showers",
    "S": "Snow",
    "SW": "Snow Showers",
    "T": "Thunderstorms",
    "VA": "Volcanic Ash",
    "WP": "Water Spouts",
    "ZF": "Freezing Fog",
    "ZL": "Freezing Drizzle",
    "ZR": "Freezing Rain",
    "ZY": "Freezing Spray",
}

QUALIFIER_TEXT = {
    "none": "",
    "DmgW": "damaging winds",
    "FL": "frequent lightning",
    "GW": "gusty winds",
    "HvyRn": "heavy rain",
    "LgA": "large hail",
    "SmA": "small hail",
    "TOR": "tornadoes",
    "OLA": "in outlying areas",
    "OBO": "on bridges and overpasses",
    "OGA": "on grassy areas",
    "OVR": "over the area",
    "Dry": "dry",
    "Primary": "",
    "Mention": "",
}

# Coverages that read after the type ("Rain Likely")
TRAILING_COVERAGES = ("Lkly",)
