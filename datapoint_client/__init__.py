"""Typed client for the Met Office DataPoint weather service."""

from .client import DataPointClient
from .constants import KNOWN_INT_PARAMETERS, KnownParameter, Resolution, UvIndex, Visibility, WeatherType
from .errors import (
    ConfigurationError,
    ConversionError,
    DataPointError,
    DecodeError,
    TransportError,
    UnknownParameterError,
)
from .http_client import KeySupplier, StaticKey
from .models import (
    Extreme,
    ExtremeCapabilities,
    Forecast,
    IntParameterValue,
    LatestExtremes,
    LocationRep,
    ParameterDescriptor,
    Period,
    Region,
    RegionalForecast,
    RegionalForecastCapabilities,
    RegionalForecastSite,
    Site,
    SiteRep,
    StringParameterValue,
    TimeSteps,
)

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "DataPointClient",
    "DataPointError",
    "DecodeError",
    "Extreme",
    "ExtremeCapabilities",
    "Forecast",
    "IntParameterValue",
    "KNOWN_INT_PARAMETERS",
    "KeySupplier",
    "KnownParameter",
    "LatestExtremes",
    "LocationRep",
    "ParameterDescriptor",
    "Period",
    "Region",
    "RegionalForecast",
    "RegionalForecastCapabilities",
    "RegionalForecastSite",
    "Resolution",
    "Site",
    "SiteRep",
    "StaticKey",
    "StringParameterValue",
    "TimeSteps",
    "TransportError",
    "UnknownParameterError",
    "UvIndex",
    "Visibility",
    "WeatherType",
]
