from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .constants import KnownParameter, UvIndex, Visibility, WeatherType


@dataclass(frozen=True)
class Site:
    """A location for which forecasts or observations are available.

    ``elevation`` is undocumented by the service and falls back to ``0.0``
    when it is missing or malformed.
    """

    id: int
    latitude: float
    longitude: float
    name: str
    elevation: float = 0.0
    region: str = ""
    unitary_auth_area: str = ""


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    units: str
    description: str


@dataclass(frozen=True)
class IntParameterValue:
    descriptor: ParameterDescriptor
    value: int

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def units(self) -> str:
        return self.descriptor.units

    @property
    def description(self) -> str:
        return self.descriptor.description


@dataclass(frozen=True)
class StringParameterValue:
    descriptor: ParameterDescriptor
    value: str

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def units(self) -> str:
        return self.descriptor.units

    @property
    def description(self) -> str:
        return self.descriptor.description


@dataclass(frozen=True)
class Forecast:
    """The weather at a single instant.

    ``time`` is rebuilt from the enclosing period's date and the offset marker
    of the record. Codes known to be numeric land in ``int_params``, every
    other code in ``string_params``; a code never appears in both.
    """

    time: datetime
    int_params: Dict[str, IntParameterValue] = field(default_factory=dict)
    string_params: Dict[str, StringParameterValue] = field(default_factory=dict)

    @property
    def weather_type(self) -> Optional[WeatherType]:
        param = self.int_params.get(KnownParameter.WEATHER_TYPE.value)
        if param is None:
            return None
        try:
            return WeatherType(param.value)
        except ValueError:
            return None

    @property
    def uv_index(self) -> Optional[UvIndex]:
        param = self.int_params.get(KnownParameter.MAX_UV_INDEX.value)
        return UvIndex(param.value) if param is not None else None

    @property
    def visibility(self) -> Optional[Visibility]:
        param = self.string_params.get(KnownParameter.VISIBILITY.value)
        if param is None:
            return None
        try:
            return Visibility(param.value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Period:
    type: str
    time: datetime
    forecasts: List[Forecast] = field(default_factory=list)


@dataclass(frozen=True)
class LocationRep:
    id: int
    latitude: float
    longitude: float
    name: str
    country: str
    continent: str
    elevation: float = 0.0
    periods: List[Period] = field(default_factory=list)


@dataclass(frozen=True)
class SiteRep:
    """Forecast or observation bundle for one location.

    ``type`` is ``"Forecast"`` or ``"Obs"``; ``data_date`` is when the model
    run or observation set was produced.
    """

    data_date: datetime
    type: str
    location: LocationRep


@dataclass(frozen=True)
class TimeSteps:
    data_date: datetime
    resolution: str
    type: str
    time_steps: List[datetime] = field(default_factory=list)


@dataclass(frozen=True)
class ExtremeCapabilities:
    extreme_date: datetime
    issued_at: datetime


@dataclass(frozen=True)
class Extreme:
    # type is e.g. HMAXT (highest maximum temperature) or LMINT (lowest minimum)
    location_id: int
    location_name: str
    type: str
    unit_of_measurement: str
    value: float


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    extremes: List[Extreme] = field(default_factory=list)


@dataclass(frozen=True)
class LatestExtremes:
    extreme_date: datetime
    issued_at: datetime
    regions: List[Region] = field(default_factory=list)


@dataclass(frozen=True)
class RegionalForecastSite:
    id: int
    name: str


@dataclass(frozen=True)
class RegionalForecastCapabilities:
    issued_at: datetime


@dataclass(frozen=True)
class Paragraph:
    title: str
    body: str


@dataclass(frozen=True)
class RegionalForecastPeriod:
    id: str
    paragraphs: List[Paragraph] = field(default_factory=list)


@dataclass(frozen=True)
class RegionalForecast:
    """Free-text regional forecast, split into periods of titled paragraphs."""

    created_on: datetime
    issued_at: datetime
    region_id: str
    periods: List[RegionalForecastPeriod] = field(default_factory=list)
