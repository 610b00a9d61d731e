"""Raw JSON shapes returned by each DataPoint endpoint.

DataPoint produces its JSON by converting XML, which leaves two quirks that
these models absorb:

* every number and date is a string, so every scalar field is ``str``;
* a repeated element holding a single entry is serialised as a bare object
  rather than a one-element array.

Missing fields decode to their empty value instead of failing, which lets
callers recognise an empty location as "no data".
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, (dict, str)):
        return [value]
    return value


def _str_or_empty(value: Any) -> Any:
    if value is None:
        return ""
    return value


Text = Annotated[str, BeforeValidator(_str_or_empty)]


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


# Site lists


class SiteEntry(WireModel):
    elevation: Text = ""
    id: Text = ""
    latitude: Text = ""
    longitude: Text = ""
    name: Text = ""
    region: Text = ""
    unitary_auth_area: Text = Field("", alias="unitaryAuthArea")


class SiteLocations(WireModel):
    location: Annotated[List[SiteEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Location"
    )


class SiteListResponse(WireModel):
    locations: SiteLocations = Field(default_factory=SiteLocations, alias="Locations")


# Capabilities


class TimeStepList(WireModel):
    ts: Annotated[List[Text], BeforeValidator(_as_list)] = Field(default_factory=list, alias="TS")


class CapabilitiesResource(WireModel):
    data_date: Text = Field("", alias="dataDate")
    resolution: Text = Field("", alias="res")
    type: Text = ""
    time_steps: TimeStepList = Field(default_factory=TimeStepList, alias="TimeSteps")


class CapabilitiesResponse(WireModel):
    resource: CapabilitiesResource = Field(default_factory=CapabilitiesResource, alias="Resource")


# Forecasts and observations


class ParamEntry(WireModel):
    name: Text = ""
    units: Text = ""
    description: Text = Field("", alias="$")


class WxEntry(WireModel):
    param: Annotated[List[ParamEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Param"
    )


class PeriodEntry(WireModel):
    type: Text = ""
    value: Text = ""
    rep: Annotated[List[Dict[str, str]], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Rep"
    )


class LocationEntry(WireModel):
    id: Text = Field("", alias="i")
    latitude: Text = Field("", alias="lat")
    longitude: Text = Field("", alias="lon")
    name: Text = ""
    country: Text = ""
    continent: Text = ""
    elevation: Text = ""
    period: Annotated[List[PeriodEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Period"
    )


class DvEntry(WireModel):
    data_date: Text = Field("", alias="dataDate")
    type: Text = ""
    location: LocationEntry = Field(default_factory=LocationEntry, alias="Location")


class DvMultipleEntry(WireModel):
    data_date: Text = Field("", alias="dataDate")
    type: Text = ""
    location: Annotated[List[LocationEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Location"
    )


class SiteRep(WireModel):
    wx: WxEntry = Field(default_factory=WxEntry, alias="Wx")
    dv: DvEntry = Field(default_factory=DvEntry, alias="DV")


class SiteRepAll(WireModel):
    wx: WxEntry = Field(default_factory=WxEntry, alias="Wx")
    dv: DvMultipleEntry = Field(default_factory=DvMultipleEntry, alias="DV")


class SiteRepResponse(WireModel):
    site_rep: SiteRep = Field(default_factory=SiteRep, alias="SiteRep")


class SiteRepAllResponse(WireModel):
    site_rep: SiteRepAll = Field(default_factory=SiteRepAll, alias="SiteRep")


# UK extremes


class ExtremeEntry(WireModel):
    location_id: Text = Field("", alias="locId")
    location_name: Text = Field("", alias="locationName")
    type: Text = ""
    uom: Text = ""
    value: Text = Field("", alias="$")


class ExtremeList(WireModel):
    extreme: Annotated[List[ExtremeEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Extreme"
    )


class RegionEntry(WireModel):
    id: Text = ""
    name: Text = ""
    extremes: ExtremeList = Field(default_factory=ExtremeList, alias="Extremes")


class RegionList(WireModel):
    region: Annotated[List[RegionEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Region"
    )


class UkExtremes(WireModel):
    extreme_date: Text = Field("", alias="extremeDate")
    issued_at: Text = Field("", alias="issuedAt")
    regions: RegionList = Field(default_factory=RegionList, alias="Regions")


class ExtremeCapabilitiesResponse(WireModel):
    uk_extremes: UkExtremes = Field(default_factory=UkExtremes, alias="UkExtremes")


class LatestExtremesResponse(WireModel):
    uk_extremes: UkExtremes = Field(default_factory=UkExtremes, alias="UkExtremes")


# Regional forecasts


class RegionalSiteEntry(WireModel):
    id: Text = Field("", alias="@id")
    name: Text = Field("", alias="@name")


class RegionalSiteLocations(WireModel):
    location: Annotated[List[RegionalSiteEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Location"
    )


class RegionalSiteListResponse(WireModel):
    locations: RegionalSiteLocations = Field(default_factory=RegionalSiteLocations, alias="Locations")


class ParagraphEntry(WireModel):
    title: Text = ""
    body: Text = Field("", alias="$")


class RegionalPeriodEntry(WireModel):
    id: Text = ""
    paragraph: Annotated[List[ParagraphEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Paragraph"
    )


class RegionalPeriodList(WireModel):
    period: Annotated[List[RegionalPeriodEntry], BeforeValidator(_as_list)] = Field(
        default_factory=list, alias="Period"
    )


class RegionalForecastEntry(WireModel):
    created_on: Text = Field("", alias="createdOn")
    issued_at: Text = Field("", alias="issuedAt")
    region_id: Text = Field("", alias="regionId")
    forecast_periods: RegionalPeriodList = Field(default_factory=RegionalPeriodList, alias="FcstPeriods")


class RegionalCapabilitiesResponse(WireModel):
    regional_forecast: RegionalForecastEntry = Field(
        default_factory=RegionalForecastEntry, alias="RegionalFcst"
    )


class RegionalForecastResponse(WireModel):
    regional_forecast: RegionalForecastEntry = Field(
        default_factory=RegionalForecastEntry, alias="RegionalFcst"
    )
