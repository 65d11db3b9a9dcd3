"""Type registry configuration schema."""
from pydantic import BaseModel, Field


class RegistryConfig(BaseModel):
    """Behaviour of type registries."""

    case_sensitive: bool = Field(
        True, description="Match keys exactly; otherwise keys are stripped and lower-cased"
    )
    allow_override: bool = Field(
        True, description="Let a later registration replace an existing key"
    )
