from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PredictionRequest(BaseModel):
    """
    Area of interest and date submitted from the map page.

    Both fields are opaque to the server: the polygon is not checked for
    closure or winding and the date is not parsed. Decoding is type-strict so
    that e.g. quoted numbers or a numeric date are rejected instead of coerced.
    NaN, Infinity and out-of-range numbers are not valid JSON numbers and are
    rejected as well.
    """

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    aoi: Optional[List[List[List[float]]]] = Field(
        default=None,
        description="Polygon rings of [longitude, latitude] pairs (GeoJSON Polygon coordinates)",
    )
    date: str = Field(default="", description="Date in YYYY-MM-DD form")

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        """Accept e.g. "AOI" or "Date" when the exact key is absent."""
        if not isinstance(data, dict):
            return data

        matched = dict(data)
        for key, value in data.items():
            name = key.lower()
            if name in cls.model_fields and name not in matched:
                matched[name] = value
        return matched
