from pydantic import BaseModel, ConfigDict, Field

from auraform.components.tokens import DEFAULT_INTENSITY, Elevation, ModeOption, TokenOptions


class TokenRules(BaseModel):
    intensity: float = Field(default=DEFAULT_INTENSITY, ge=0, le=100, allow_inf_nan=False)
    mode: ModeOption = "auto"

    model_config = ConfigDict(extra="forbid")

    def to_options(self) -> TokenOptions:
        return TokenOptions(intensity=self.intensity, mode=self.mode)


class SurfaceRules(BaseModel):
    elevation: Elevation = "medium"
    high_contrast: bool = False

    model_config = ConfigDict(extra="forbid")


class Rules(BaseModel):
    tokens: TokenRules = Field(default_factory=TokenRules)
    surface: SurfaceRules = Field(default_factory=SurfaceRules)
