from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LENGTH = 255


class SanitizeOptions(BaseModel):
    """Sanitizer configuration (immutable)"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    padding: int = Field(default=0, description="Characters reserved for a suffix such as an extension")
    length: int = Field(default=DEFAULT_LENGTH, description="Maximum name length in characters")
    whitespace: str = Field(default=" ", description="Replacement for runs of whitespace")
    replace: str = Field(default="", description="Replacement for each illegal character")

    @property
    def max_length(self) -> int:
        return self.length - self.padding

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "SanitizeOptions":
        """Build from a plain mapping. Unknown keys are ignored, None means default."""
        if not options:
            return cls()
        return cls(**{
            key: value
            for key, value in options.items()
            if isinstance(key, str) and value is not None
        })

    @classmethod
    def coerce(
        cls,
        options: Union["SanitizeOptions", Mapping[str, Any], None] = None,
        **overrides: Any
    ) -> "SanitizeOptions":
        """Accept an options instance, a mapping or nothing, plus keyword overrides"""
        if isinstance(options, cls):
            return options.merged(overrides) if overrides else options
        return cls.from_mapping({**(options or {}), **overrides})

    def merged(self, options: Optional[Mapping[str, Any]]) -> "SanitizeOptions":
        """Copy with the non-None entries of `options` applied on top"""
        if not options:
            return self
        return self.from_mapping({**self.model_dump(), **{
            key: value for key, value in options.items() if value is not None
        }})
