"""Codes and enumerations documented by the DataPoint service."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import FrozenSet


class Resolution(str, Enum):
    DAILY = "daily"
    THREE_HOURLY = "3hourly"
    HOURLY = "hourly"


class KnownParameter(str, Enum):
    FEELS_LIKE_TEMP = "F"
    WIND_GUST = "G"
    WIND_GUST_NOON = "Gn"
    SCREEN_RELATIVE_HUMIDITY = "H"
    SCREEN_RELATIVE_HUMIDITY_NOON = "Hn"
    TEMPERATURE = "T"
    DAY_MAXIMUM_TEMPERATURE = "Dm"
    NIGHT_MINIMUM_TEMPERATURE = "Nm"
    FEELS_LIKE_DAY_MAXIMUM_TEMPERATURE = "FDm"
    VISIBILITY = "V"
    WIND_DIRECTION = "D"
    WIND_SPEED = "S"
    MAX_UV_INDEX = "U"
    WEATHER_TYPE = "W"
    PRECIPITATION_PROBABILITY = "Pp"
    PRECIPITATION_PROBABILITY_DAY = "PPd"
    PRECIPITATION_PROBABILITY_NIGHT = "PPn"


# Codes always decoded as whole numbers. Visibility and wind direction are
# text codes and stay out of this set.
KNOWN_INT_PARAMETERS: FrozenSet[str] = frozenset(
    {
        KnownParameter.FEELS_LIKE_TEMP.value,
        KnownParameter.WIND_GUST.value,
        KnownParameter.SCREEN_RELATIVE_HUMIDITY.value,
        KnownParameter.PRECIPITATION_PROBABILITY.value,
        KnownParameter.WIND_SPEED.value,
        KnownParameter.TEMPERATURE.value,
        KnownParameter.WEATHER_TYPE.value,
        KnownParameter.MAX_UV_INDEX.value,
        KnownParameter.WIND_GUST_NOON.value,
        KnownParameter.SCREEN_RELATIVE_HUMIDITY_NOON.value,
        KnownParameter.DAY_MAXIMUM_TEMPERATURE.value,
        KnownParameter.NIGHT_MINIMUM_TEMPERATURE.value,
        KnownParameter.FEELS_LIKE_DAY_MAXIMUM_TEMPERATURE.value,
        KnownParameter.PRECIPITATION_PROBABILITY_DAY.value,
        KnownParameter.PRECIPITATION_PROBABILITY_NIGHT.value,
    }
)


class UvIndex(int):
    """Maximum UV index with the exposure bands published by the Met Office."""

    def is_low_exposure(self) -> bool:
        return 1 <= self <= 2

    def is_moderate_exposure(self) -> bool:
        return 3 <= self <= 5

    def is_high_exposure(self) -> bool:
        return 6 <= self <= 7

    def is_very_high_exposure(self) -> bool:
        return 8 <= self <= 10

    def is_extreme_exposure(self) -> bool:
        return self >= 11


class WeatherType(IntEnum):
    CLEAR_NIGHT = 0
    SUNNY_DAY = 1
    PARTLY_CLOUDY_NIGHT = 2
    PARTLY_CLOUDY_DAY = 3
    MIST = 5
    FOG = 6
    CLOUDY = 7
    OVERCAST = 8
    LIGHT_RAIN_SHOWER_NIGHT = 9
    LIGHT_RAIN_SHOWER_DAY = 10
    DRIZZLE = 11
    LIGHT_RAIN = 12
    HEAVY_RAIN_SHOWER_NIGHT = 13
    HEAVY_RAIN_SHOWER_DAY = 14
    HEAVY_RAIN = 15
    SLEET_SHOWER_NIGHT = 16
    SLEET_SHOWER_DAY = 17
    SLEET = 18
    HAIL_SHOWER_NIGHT = 19
    HAIL_SHOWER_DAY = 20
    HAIL = 21
    LIGHT_SNOW_SHOWER_NIGHT = 22
    LIGHT_SNOW_SHOWER_DAY = 23
    LIGHT_SNOW = 24
    HEAVY_SNOW_SHOWER_NIGHT = 25
    HEAVY_SNOW_SHOWER_DAY = 26
    HEAVY_SNOW = 27
    THUNDER_SHOWER_NIGHT = 28
    THUNDER_SHOWER_DAY = 29
    THUNDER = 30


class Visibility(str, Enum):
    UNKNOWN = "UN"
    VERY_POOR = "VP"
    POOR = "PO"
    MODERATE = "MO"
    GOOD = "GO"
    VERY_GOOD = "VG"
    EXCELLENT = "EX"
