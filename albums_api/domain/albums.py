"""Album entity and the seed catalog."""
from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, field_validator


class Album(BaseModel):
    """A single record in the catalog.

    Ids are supplied by the caller and are not required to be unique. Missing
    fields fall back to empty values and unknown fields are ignored; only the
    JSON types are checked (a string price is rejected, an integer one is
    accepted and stored as a float). Prices must be finite.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    id: StrictStr = ""
    title: StrictStr = ""
    artist: StrictStr = ""
    price: StrictFloat | StrictInt = 0.0

    @field_validator("price")
    @classmethod
    def _as_float(cls, value: float | int) -> float:
        try:
            price = float(value)
        except OverflowError:
            raise ValueError("price out of range") from None
        if not math.isfinite(price):
            raise ValueError("price out of range")
        return price


DEFAULT_ALBUMS: tuple[Album, ...] = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


def default_albums() -> list[Album]:
    """Fresh copy of the seed catalog used when no file can be loaded."""
    return list(DEFAULT_ALBUMS)
