"""Raw and normalized money entry models."""

from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr

from mixedunits.models.enums import DetectedKind

# JSON literals such as 1e400 overflow to infinity; they are not amounts
FiniteStrictFloat = Annotated[StrictFloat, AllowInfNan(False)]


class RawEntry(BaseModel):
    """A single (key, value) pair taken from the input object."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: StrictInt | FiniteStrictFloat | StrictStr


class NormalizedEntry(BaseModel):
    """Converted amount for one key, ready for display."""

    model_config = ConfigDict(frozen=True)

    key: str
    detected_kind: DetectedKind
    units: int
    formatted: str

    @property
    def detected(self) -> str:
        return self.detected_kind.label

    def to_record(self) -> dict:
        """Return the display record: key, units, detected label, formatted."""
        return {
            "key": self.key,
            "units": self.units,
            "detected": self.detected,
            "formatted": self.formatted,
        }
