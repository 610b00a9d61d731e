"""Turn decoded DataPoint payloads into the typed domain model.

Every number and date arrives as text and is parsed exactly once here. Any
failure raises :class:`ConversionError` and abandons the whole response; the
only exception is elevation, which is undocumented and falls back to zero
with a warning.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Mapping, Tuple

from .constants import KNOWN_INT_PARAMETERS
from .errors import ConversionError, UnknownParameterError
from .logging import get_logger
from .models import (
    Extreme,
    ExtremeCapabilities,
    Forecast,
    IntParameterValue,
    LatestExtremes,
    LocationRep,
    Paragraph,
    ParameterDescriptor,
    Period,
    Region,
    RegionalForecast,
    RegionalForecastCapabilities,
    RegionalForecastPeriod,
    RegionalForecastSite,
    Site,
    SiteRep,
    StringParameterValue,
    TimeSteps,
)
from . import schemas

logger = get_logger(__name__)

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DATETIME_FRACTION_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_FORMAT = "%Y-%m-%d"
PERIOD_DATE_FORMAT = "%Y-%m-%dZ"

OFFSET_KEY = "$"
DAY_MARKER = "Day"
NIGHT_MARKER = "Night"
# Night forecasts are pinned to the last second of the day, not to a true night time.
NIGHT_OFFSET_SECONDS = 86399

INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(raw: str, field: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ConversionError(field, raw, "not a base-10 integer")
    return int(raw)


def parse_int16(raw: str, field: str) -> int:
    value = parse_int(raw, field)
    if not INT16_MIN <= value <= INT16_MAX:
        raise ConversionError(field, raw, "value out of range")
    return value


def parse_float(raw: str, field: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise ConversionError(field, raw, "not a decimal number")
    return float(raw)


def parse_datetime(raw: str, field: str) -> datetime:
    """Parse an ISO-8601 combined date and time carrying an explicit zone.

    Fractional seconds are accepted and kept.
    """
    layout = DATETIME_FRACTION_FORMAT if "." in raw else DATETIME_FORMAT
    try:
        parsed = datetime.strptime(raw, layout)
    except ValueError as exc:
        raise ConversionError(field, raw, f"expected format {DATETIME_FORMAT}") from exc
    return parsed.astimezone(timezone.utc)


def parse_date(raw: str, field: str) -> datetime:
    try:
        parsed = datetime.strptime(raw, DATE_FORMAT)
    except ValueError as exc:
        raise ConversionError(field, raw, f"expected format {DATE_FORMAT}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def parse_period_date(raw: str, field: str = "period date") -> datetime:
    try:
        parsed = datetime.strptime(raw, PERIOD_DATE_FORMAT)
    except ValueError as exc:
        raise ConversionError(field, raw, f"expected format {PERIOD_DATE_FORMAT}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def parse_elevation(raw: str, *, context: str) -> float:
    if raw == "":
        return 0.0
    try:
        return parse_float(raw, "elevation")
    except ConversionError as exc:
        logger.warning("convert.elevation_invalid", elevation=raw, context=context, error=str(exc))
        return 0.0


def forecast_offset(marker: str) -> timedelta:
    """Return the offset from the start of the period encoded by a ``$`` marker."""
    if marker == DAY_MARKER:
        return timedelta(0)
    if marker == NIGHT_MARKER:
        return timedelta(seconds=NIGHT_OFFSET_SECONDS)
    minutes = parse_int16(marker, "forecast offset")
    return timedelta(minutes=minutes)


def build_parameter_table(params: Iterable[schemas.ParamEntry]) -> Dict[str, ParameterDescriptor]:
    return {
        param.name: ParameterDescriptor(
            name=param.name,
            units=param.units,
            description=param.description,
        )
        for param in params
    }


def convert_rep(
    rep: Mapping[str, str],
    table: Mapping[str, ParameterDescriptor],
    period_time: datetime,
) -> Forecast:
    if OFFSET_KEY not in rep:
        raise ConversionError("forecast offset", "", "could not find forecast offset")
    offset = forecast_offset(rep[OFFSET_KEY])

    int_params: Dict[str, IntParameterValue] = {}
    string_params: Dict[str, StringParameterValue] = {}
    for code, raw in rep.items():
        if code == OFFSET_KEY:
            continue

        descriptor = table.get(code)
        if descriptor is None:
            raise UnknownParameterError(code)

        if code in KNOWN_INT_PARAMETERS:
            int_params[code] = IntParameterValue(
                descriptor=descriptor,
                value=parse_int16(raw, f"known int value {code}"),
            )
        else:
            string_params[code] = StringParameterValue(descriptor=descriptor, value=raw)

    return Forecast(
        time=period_time + offset,
        int_params=int_params,
        string_params=string_params,
    )


def convert_period(entry: schemas.PeriodEntry, table: Mapping[str, ParameterDescriptor]) -> Period:
    period_time = parse_period_date(entry.value)
    return Period(
        type=entry.type,
        time=period_time,
        forecasts=[convert_rep(rep, table, period_time) for rep in entry.rep],
    )


def convert_location(
    table: Mapping[str, ParameterDescriptor],
    type_name: str,
    data_date: datetime,
    entry: schemas.LocationEntry,
) -> SiteRep:
    periods = [convert_period(period, table) for period in entry.period]
    return SiteRep(
        data_date=data_date,
        type=type_name,
        location=LocationRep(
            id=parse_int(entry.id, "location id"),
            latitude=parse_float(entry.latitude, "latitude"),
            longitude=parse_float(entry.longitude, "longitude"),
            name=entry.name,
            country=entry.country,
            continent=entry.continent,
            elevation=parse_elevation(entry.elevation, context=f"location {entry.id}"),
            periods=periods,
        ),
    )


def _site_rep_context(
    wx: schemas.WxEntry, data_date: str
) -> Tuple[Dict[str, ParameterDescriptor], datetime]:
    return build_parameter_table(wx.param), parse_datetime(data_date, "data date")


def convert_site_rep(response: schemas.SiteRepResponse) -> SiteRep:
    site_rep = response.site_rep
    table, data_date = _site_rep_context(site_rep.wx, site_rep.dv.data_date)
    return convert_location(table, site_rep.dv.type, data_date, site_rep.dv.location)


def convert_site_reps(response: schemas.SiteRepAllResponse) -> List[SiteRep]:
    site_rep = response.site_rep
    table, data_date = _site_rep_context(site_rep.wx, site_rep.dv.data_date)
    return [convert_location(table, site_rep.dv.type, data_date, entry) for entry in site_rep.dv.location]


def convert_site(entry: schemas.SiteEntry) -> Site:
    return Site(
        id=parse_int(entry.id, "site id"),
        latitude=parse_float(entry.latitude, "latitude"),
        longitude=parse_float(entry.longitude, "longitude"),
        name=entry.name,
        elevation=parse_elevation(entry.elevation, context=f"site {entry.id}"),
        region=entry.region,
        unitary_auth_area=entry.unitary_auth_area,
    )


def convert_site_list(response: schemas.SiteListResponse) -> List[Site]:
    return [convert_site(entry) for entry in response.locations.location]


def convert_capabilities(response: schemas.CapabilitiesResponse) -> TimeSteps:
    resource = response.resource
    return TimeSteps(
        data_date=parse_datetime(resource.data_date, "data date"),
        resolution=resource.resolution,
        type=resource.type,
        time_steps=[parse_datetime(step, "time step") for step in resource.time_steps.ts],
    )


def convert_extreme_capabilities(response: schemas.ExtremeCapabilitiesResponse) -> ExtremeCapabilities:
    extremes = response.uk_extremes
    return ExtremeCapabilities(
        extreme_date=parse_date(extremes.extreme_date, "extreme date"),
        issued_at=parse_datetime(extremes.issued_at, "issued at date"),
    )


def convert_extreme(entry: schemas.ExtremeEntry) -> Extreme:
    return Extreme(
        location_id=parse_int(entry.location_id, "extreme location id"),
        location_name=entry.location_name,
        type=entry.type,
        unit_of_measurement=entry.uom,
        value=parse_float(entry.value, "extreme value"),
    )


def convert_latest_extremes(response: schemas.LatestExtremesResponse) -> LatestExtremes:
    extremes = response.uk_extremes
    regions = [
        Region(
            id=region.id,
            name=region.name,
            extremes=[convert_extreme(extreme) for extreme in region.extremes.extreme],
        )
        for region in extremes.regions.region
    ]
    return LatestExtremes(
        extreme_date=parse_date(extremes.extreme_date, "extreme date"),
        issued_at=parse_datetime(extremes.issued_at, "issued at date"),
        regions=regions,
    )


def convert_regional_site_list(response: schemas.RegionalSiteListResponse) -> List[RegionalForecastSite]:
    return [
        RegionalForecastSite(id=parse_int(entry.id, "region id"), name=entry.name)
        for entry in response.locations.location
    ]


def convert_regional_capabilities(
    response: schemas.RegionalCapabilitiesResponse,
) -> RegionalForecastCapabilities:
    return RegionalForecastCapabilities(
        issued_at=parse_datetime(response.regional_forecast.issued_at, "issued at date"),
    )


def convert_regional_forecast(response: schemas.RegionalForecastResponse) -> RegionalForecast:
    forecast = response.regional_forecast
    periods = [
        RegionalForecastPeriod(
            id=period.id,
            paragraphs=[Paragraph(title=p.title, body=p.body) for p in period.paragraph],
        )
        for period in forecast.forecast_periods.period
    ]
    return RegionalForecast(
        created_on=parse_datetime(forecast.created_on, "created on date"),
        issued_at=parse_datetime(forecast.issued_at, "issued at date"),
        region_id=forecast.region_id,
        periods=periods,
    )
