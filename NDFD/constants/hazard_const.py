"""
Constants for NDFD hazard phenomena
"""

# Phenomena code -> English text
HAZARD_PHENOMENA = {
    "AF": "Ashfall",
    "AS": "Air Stagnation",
    "BS": "Blowing Snow",
    "BW": "Brisk Wind",
    "BZ": "Blizzard",
    "CF": "Coastal Flood",
    "DS": "Dust Storm",
    "DU": "Blowing Dust",
    "EC": "Extreme Cold",
    "EH": "Excessive Heat",
    "FA": "Areal Flood",
    "FF": "Flash Flood",
    "FG": "Dense Fog",
    "FR": "Frost",
    "FW": "Fire Weather",
    "FZ": "Freeze",
    "GL": "Gale",
    "HF": "Hurricane Force Wind",
    "HI": "Hurricane Wind",
    "HS": "Heavy Snow",
    "HT": "Heat",
    "HU": "Hurricane",
    "HW": "High Wind",
    "HZ": "Hard Freeze",
    "IP": "Sleet",
    "IS": "Ice Storm",
    "LB": "Lake Effect Snow and Blowing Snow",
    "LE": "Lake Effect",
    "LO": "Low Water",
    "LS": "Lakeshore Flood",
    "LW": "Lake Wind",
    "MA": "Marine",
    "RB": "Small Craft, for Rough Bar",
    "SB": "Snow and Blowing Snow",
    "SC": "Small Craft",
    "SE": "Hazardous Seas",
    "SI": "Small Craft, for Winds",
    "SM": "Dense Smoke",
    "SN": "Snow",
    "SR": "Storm",
    "SU": "High Surf",
    "SV": "Severe Thunderstorm",
    "SW": "Small Craft, for Hazardous Seas",
    "TI": "Tropical Storm Wind",
    "TO": "Tornado",
    "TR": "Tropical Storm",
    "TS": "Tsunami",
    "TY": "Typhoon",
    "UP": "Freezing Spray",
    "WC": "Wind Chill",
    "WI": "Wind",
    "WS": "Winter Storm",
    "WW": "Winter Weather",
    "ZF": "Freezing Fog",
    "ZR": "Freezing Rain",
    "none": "none",
}

# Marine phenomena that carry their own icon
HAZARD_ICONS = {
    "GL": "mf_gale.gif",
    "HF": "mf_hurr.gif",
    "HI": "mf_hurr.gif",
    "RB": "mf_smcraft.gif",
    "SC": "mf_smcraft.gif",
    "SI": "mf_smcraft.gif",
    "SW": "mf_smcraft.gif",
    "TI": "mf_storm.gif",
    "TR": "mf_storm.gif",
    "TS": "m_wave.gif",
}

# Significance code -> English text
HAZARD_SIGNIFICANCE = {
    "W": "Warning",
    "A": "Watch",
    "Y": "Advisory",
    "S": "Statement",
    "none": "none",
}

HAZARD_CODE_SEPARATOR = "."
