import pytest

from datapoint_client.constants import KNOWN_INT_PARAMETERS, KnownParameter, UvIndex, WeatherType


def test_text_codes_are_not_integer_parameters():
    assert KnownParameter.VISIBILITY.value not in KNOWN_INT_PARAMETERS
    assert KnownParameter.WIND_DIRECTION.value not in KNOWN_INT_PARAMETERS
    assert "$" not in KNOWN_INT_PARAMETERS
    assert len(KNOWN_INT_PARAMETERS) == 15


@pytest.mark.parametrize(
    "value, band",
    [
        (0, None),
        (1, "low"),
        (2, "low"),
        (3, "moderate"),
        (5, "moderate"),
        (6, "high"),
        (7, "high"),
        (8, "very_high"),
        (10, "very_high"),
        (11, "extreme"),
    ],
)
def test_uv_index_bands(value, band):
    index = UvIndex(value)
    bands = {
        "low": index.is_low_exposure(),
        "moderate": index.is_moderate_exposure(),
        "high": index.is_high_exposure(),
        "very_high": index.is_very_high_exposure(),
        "extreme": index.is_extreme_exposure(),
    }
    assert [name for name, hit in bands.items() if hit] == ([band] if band else [])


def test_weather_type_has_no_code_four():
    with pytest.raises(ValueError):
        WeatherType(4)
    assert WeatherType(30) is WeatherType.THUNDER
