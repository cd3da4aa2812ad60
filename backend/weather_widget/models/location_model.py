from pydantic import BaseModel, ConfigDict, Field

CURRENT_LOCATION = "Current Location"

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class ResolvedLocation(BaseModel):
    """A place the weather is shown for. Lives for one lookup cycle."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    country: str = ""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @property
    def label(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name

    @classmethod
    def fallback(cls, latitude: float, longitude: float) -> "ResolvedLocation":
        """Placeholder used when the coordinates cannot be named."""
        return cls(name=CURRENT_LOCATION, country="", latitude=latitude, longitude=longitude)
