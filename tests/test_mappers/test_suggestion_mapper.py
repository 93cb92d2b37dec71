import pytest

from app.exceptions.custom import GeoapifyError
from app.mappers.suggestion_mapper import map_feature_to_suggestion
from app.schemas.geoapify import Feature
from tests.fakes import feature


def test_full_mapping():
    f = Feature(**feature(name="Paris", city="Paris", country="France", lon=2.35, lat=48.85))

    result = map_feature_to_suggestion(f)

    assert result.city == "Paris"
    assert result.country == "France"
    assert result.lon == 2.35
    assert result.lat == 48.85


def test_city_falls_back_to_name():
    f = Feature(**feature(name="Parma", country="Italy", lon=10.33, lat=44.8))

    result = map_feature_to_suggestion(f)

    assert result.city == "Parma"


def test_missing_country_is_none():
    f = Feature(**feature(city="Paramaribo", lon=-55.2, lat=5.85))

    assert map_feature_to_suggestion(f).country is None


def test_coordinates_from_geometry():
    f = Feature(
        properties={"city": "Parnu", "country": "Estonia"},
        geometry={"type": "Point", "coordinates": [24.5, 58.38]},
    )

    result = map_feature_to_suggestion(f)

    assert (result.lon, result.lat) == (24.5, 58.38)


def test_no_coordinates_raises():
    f = Feature(properties={"city": "Nowhere"})

    with pytest.raises(GeoapifyError):
        map_feature_to_suggestion(f)
