from app.exceptions.custom import GeoapifyError
from app.schemas.geoapify import Feature
from app.schemas.responses import CitySuggestion


def map_feature_to_suggestion(feature: Feature) -> CitySuggestion:
    """Map an autocomplete feature to a suggestion, falling back to `name` for the city."""
    props = feature.properties
    point = feature.point()
    if point is None:
        raise GeoapifyError("Autocomplete feature without coordinates")
    lon, lat = point
    return CitySuggestion(
        city=props.city or props.name,
        country=props.country,
        lon=lon,
        lat=lat,
    )
