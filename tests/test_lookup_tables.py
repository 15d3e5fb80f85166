import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import pytest

from NDFD.utils.hazards import describe_hazard, hazard_phenomena, parse_hazard_code
from NDFD.utils.indices import NDFDElement, element_name, lookup_element
from NDFD.utils.logging_config import LOG_FORMAT, setup_logging
from NDFD.weather.decoder import WeatherGroup, decode_weather
from NDFD.weather.translate import describe_group, describe_groups


class TestElementLookup:
    @pytest.mark.parametrize(
        "name, convention, element",
        [
            ("MaxT", 0, NDFDElement.MAX),
            ("pop12", 0, NDFDElement.POP),
            ("wspd", 1, NDFDElement.WS),
            ("rhm", 1, NDFDElement.RH),
            ("cl", 2, NDFDElement.SKY),
            ("wx", 2, NDFDElement.WX),
        ],
    )
    def test_known_names(self, name, convention, element):
        assert lookup_element(name, convention=convention) == element

    def test_case_sensitive_lookup(self):
        assert lookup_element("MaxT", to_lower=False) == NDFDElement.UNDEF

    def test_unknown_name_or_convention(self):
        assert lookup_element("dewpoint") == NDFDElement.UNDEF
        assert lookup_element("maxt", convention=7) == NDFDElement.UNDEF

    def test_element_names(self):
        assert element_name(NDFDElement.TEMP) == "t"
        assert element_name(NDFDElement.TEMP, 1) == "temp"
        assert element_name(NDFDElement.TEMP, 2) == "tt"
        assert element_name(NDFDElement.UNDEF) is None
        assert element_name(NDFDElement.MATCHALL) is None


class TestHazards:
    def test_marine_phenomena_carry_icons(self):
        assert hazard_phenomena("GL") == ("Gale", "mf_gale.gif")
        assert hazard_phenomena("TS") == ("Tsunami", "m_wave.gif")

    def test_icon_ignores_significance(self):
        for hazard in ("SC.Y", "SC.W", "SC"):
            phenomena, _ = parse_hazard_code(hazard)
            assert hazard_phenomena(phenomena) == ("Small Craft", "mf_smcraft.gif")

    def test_land_phenomena_have_no_icon(self):
        assert hazard_phenomena("WS") == ("Winter Storm", None)

    def test_unknown_phenomena(self):
        assert hazard_phenomena("XX") == ("none", None)

    def test_parse_hazard_code(self):
        assert parse_hazard_code("WS.W") == ("WS", "W")
        assert parse_hazard_code("HW") == ("HW", "none")
        assert parse_hazard_code("") == ("none", "none")

    @pytest.mark.parametrize(
        "hazard, text",
        [
            ("WS.W", "Winter Storm Warning"),
            ("FG.Y", "Dense Fog Advisory"),
            ("HU.A", "Hurricane Watch"),
            ("HW", "High Wind"),
            ("ZZ.W", "none"),
        ],
    )
    def test_describe_hazard(self, hazard, text):
        assert describe_hazard(hazard) == text


class TestWeatherText:
    def test_leading_coverage(self):
        assert describe_group(WeatherGroup("Chc", "R", "-")) == "Chance Light Rain"

    def test_trailing_coverage(self):
        assert describe_group(WeatherGroup("Lkly", "R")) == "Rain Likely"
        assert describe_group(WeatherGroup("Lkly", "S", "-")) == "Light Snow Likely"

    def test_hazard_qualifiers(self):
        group = WeatherGroup("Sct", "T", qualifiers=("DmgW", "LgA"))
        assert (
            describe_group(group)
            == "Scattered Thunderstorms with damaging winds and large hail"
        )

    def test_place_qualifier(self):
        group = WeatherGroup("Patchy", "F", qualifiers=("OLA",))
        assert describe_group(group) == "Patchy Fog in outlying areas"

    def test_no_weather(self):
        assert describe_group(WeatherGroup()) == "No Weather"
        assert describe_groups([]) == "No Weather"
        assert describe_groups(decode_weather("<NoCov>:<NoWx>:<NoInten>:<NoVis>:")) == "No Weather"

    def test_multiple_groups(self):
        groups = decode_weather("Chc:R:-:<NoVis>:^Chc:S:-:<NoVis>:^SChc:T:<NoInten>:<NoVis>:")
        assert (
            describe_groups(groups)
            == "Chance Light Rain, Chance Light Snow and Slight Chance Thunderstorms"
        )


def test_setup_logging_reads_environment(monkeypatch):
    monkeypatch.setenv("NDFD_LOG_LEVEL", "warning")
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging()
        assert root.level == logging.WARNING
        assert root.handlers[-1].formatter._fmt == LOG_FORMAT
    finally:
        root.removeHandler(root.handlers[-1])
        root.setLevel(previous_level)
