from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from . import converters, schemas
from .config import DEFAULT_BASE_URL, ClientConfig
from .constants import Resolution
from .errors import ConfigurationError, DecodeError
from .http_client import DataPointFetcher, KeySupplier, StaticKey
from .logging import get_logger
from .models import (
    ExtremeCapabilities,
    LatestExtremes,
    RegionalForecast,
    RegionalForecastCapabilities,
    RegionalForecastSite,
    Site,
    SiteRep,
    TimeSteps,
)

logger = get_logger(__name__)

W = TypeVar("W", bound=BaseModel)
R = TypeVar("R")

FORECAST_PREFIX = "val/wxfcs/all/json"
OBSERVATION_PREFIX = "val/wxobs/all/json"
REGIONAL_FORECAST_PREFIX = "txt/wxfcs/regionalforecast/json"
UK_EXTREMES_PREFIX = "txt/wxobs/ukextremes/json"

TIME_PARAM_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _resolution_params(resolution: Union[Resolution, str], at: Optional[datetime] = None) -> Dict[str, str]:
    try:
        params = {"res": Resolution(resolution).value}
    except ValueError as exc:
        raise ConfigurationError(f"unknown resolution {resolution!r}") from exc
    if at is not None:
        if at.tzinfo is not None:
            at = at.astimezone(timezone.utc)
        params["time"] = at.strftime(TIME_PARAM_FORMAT)
    return params


class DataPointClient:
    """Client for the Met Office DataPoint service.

    One method per documented resource. Each call sends a single request and
    returns the converted domain value, or raises a
    :class:`~datapoint_client.errors.DataPointError` subclass naming the stage
    that failed. Nothing is cached or retried.

    Args:
        api_key: Fixed API key used for every request.
        key_supplier: Object whose ``get()`` returns the key; queried on every
            request so keys can rotate. Takes precedence over ``api_key``.
        base_url: Root of the service, override to go through a proxy.
        http_client: Preconfigured ``httpx.Client`` (timeouts, proxies, TLS,
            test transports). Left open by :meth:`close`.
        timeout: Timeout for the client created when ``http_client`` is not
            given.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        key_supplier: Optional[KeySupplier] = None,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        if key_supplier is None:
            if not api_key:
                raise ConfigurationError("no api key provided")
            key_supplier = StaticKey(api_key)
        self.base_url = base_url
        self.fetcher = DataPointFetcher(
            key_supplier,
            base_url=base_url,
            client=http_client,
            timeout=timeout,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        key_supplier: Optional[KeySupplier] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> "DataPointClient":
        return cls(
            api_key=config.api_key,
            key_supplier=key_supplier,
            base_url=config.base_url,
            http_client=http_client,
            timeout=config.timeout,
        )

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "DataPointClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        description: str,
        suffix: str,
        schema: Type[W],
        convert: Callable[[W], R],
        params: Optional[Dict[str, str]] = None,
    ) -> R:
        decoded = self._decode(description, suffix, schema, params)
        return convert(decoded)

    def _decode(
        self,
        description: str,
        suffix: str,
        schema: Type[W],
        params: Optional[Dict[str, str]] = None,
    ) -> W:
        result = self.fetcher.fetch(description, suffix, params)
        try:
            return schema.model_validate_json(result.body)
        except ValidationError as exc:
            logger.warning(
                "client.decode_failure",
                description=description,
                url=result.url,
                status_code=result.status_code,
                error_count=exc.error_count(),
            )
            raise DecodeError(
                f"failed to deserialise body from {result.url} for {description}: {exc}",
                description=description,
                url=result.url,
            ) from exc

    def _single_site_rep(self, description: str, suffix: str, params: Dict[str, str]) -> Optional[SiteRep]:
        decoded = self._decode(description, suffix, schemas.SiteRepResponse, params)
        if decoded.site_rep.dv.location.id == "":
            logger.info("client.no_data", description=description, suffix=suffix, **params)
            return None
        return converters.convert_site_rep(decoded)

    # Site lists

    def forecast_site_list(self) -> List[Site]:
        """List the roughly 5,000 UK sites with daily and three hourly forecasts."""
        return self._request(
            "forecast site list",
            f"{FORECAST_PREFIX}/sitelist",
            schemas.SiteListResponse,
            converters.convert_site_list,
        )

    def observation_site_list(self) -> List[Site]:
        """List the sites for which hourly observations are available."""
        return self._request(
            "observation site list",
            f"{OBSERVATION_PREFIX}/sitelist",
            schemas.SiteListResponse,
            converters.convert_site_list,
        )

    # Forecasts

    def forecast_time_step_capabilities(self, resolution: Union[Resolution, str]) -> TimeSteps:
        """Return the timesteps currently available from the five day forecast.

        Check this before requesting a specific ``at`` time to avoid
        redundant calls.
        """
        return self._request(
            "forecast capabilities",
            f"{FORECAST_PREFIX}/capabilities",
            schemas.CapabilitiesResponse,
            converters.convert_capabilities,
            _resolution_params(resolution),
        )

    def five_day_forecast(
        self,
        resolution: Union[Resolution, str],
        location_id: int,
        at: Optional[datetime] = None,
    ) -> Optional[SiteRep]:
        """Fetch the daily or three hourly five day forecast for one site.

        Returns ``None`` when the service has no data for the site at the
        requested resolution and time. An unrecognised resolution string
        raises :class:`ConfigurationError` before any request is sent.
        """
        return self._single_site_rep(
            "five day forecast",
            f"{FORECAST_PREFIX}/{location_id}",
            _resolution_params(resolution, at),
        )

    def five_day_forecast_for_all_locations(
        self,
        resolution: Union[Resolution, str],
        at: Optional[datetime] = None,
    ) -> List[SiteRep]:
        """Same as :meth:`five_day_forecast` for every site. The payload is large."""
        return self._request(
            "five day forecast for all locations",
            f"{FORECAST_PREFIX}/all",
            schemas.SiteRepAllResponse,
            converters.convert_site_reps,
            _resolution_params(resolution, at),
        )

    # Observations

    def observation_time_step_capabilities(self) -> TimeSteps:
        return self._request(
            "observation capabilities",
            f"{OBSERVATION_PREFIX}/capabilities",
            schemas.CapabilitiesResponse,
            converters.convert_capabilities,
            _resolution_params(Resolution.HOURLY),
        )

    def hourly_observations(self, location_id: int) -> Optional[SiteRep]:
        """Fetch the last 24 hours of observations for one site, or ``None`` if there are none."""
        return self._single_site_rep(
            "hourly observations",
            f"{OBSERVATION_PREFIX}/{location_id}",
            _resolution_params(Resolution.HOURLY),
        )

    # Regional forecasts

    def regional_forecast_site_list(self) -> List[RegionalForecastSite]:
        return self._request(
            "regional forecast site list",
            f"{REGIONAL_FORECAST_PREFIX}/sitelist",
            schemas.RegionalSiteListResponse,
            converters.convert_regional_site_list,
        )

    def regional_forecast_capabilities(self) -> RegionalForecastCapabilities:
        """Return when the regional forecasts were last issued."""
        return self._request(
            "regional forecast capabilities",
            f"{REGIONAL_FORECAST_PREFIX}/capabilities",
            schemas.RegionalCapabilitiesResponse,
            converters.convert_regional_capabilities,
        )

    def regional_forecast(self, region_id: int) -> RegionalForecast:
        return self._request(
            "regional forecast",
            f"{REGIONAL_FORECAST_PREFIX}/{region_id}",
            schemas.RegionalForecastResponse,
            converters.convert_regional_forecast,
        )

    # UK extremes

    def uk_extremes_capabilities(self) -> ExtremeCapabilities:
        """Return when the UK extremes feed was last updated and the day it covers."""
        return self._request(
            "uk extremes capabilities",
            f"{UK_EXTREMES_PREFIX}/capabilities",
            schemas.ExtremeCapabilitiesResponse,
            converters.convert_extreme_capabilities,
        )

    def uk_extremes_latest(self) -> LatestExtremes:
        """Return the observed extremes across UK regions for the day of issue."""
        return self._request(
            "uk extremes latest",
            f"{UK_EXTREMES_PREFIX}/latest",
            schemas.LatestExtremesResponse,
            converters.convert_latest_extremes,
        )
