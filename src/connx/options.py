"""
Codec option models.

Typed options selecting a text encoding scheme and one of its alphabets.
"""

from __future__ import annotations
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

# Alphabets available for each scheme; the first entry is the default
SCHEME_ALPHABETS: Dict[str, tuple] = {
    "base16": ("std",),
    "base32": ("std", "hex"),
    "base64": ("std", "url"),
}


class CodecOptions(BaseModel):
    """
    Options for building a ``Codec``.

    ``scheme`` also accepts ``hex`` for base16. When ``alphabet`` is omitted
    the scheme's standard alphabet is used.
    """
    scheme: Literal["base16", "base32", "base64"] = Field(
        default="base64", description="Encoding scheme"
    )
    alphabet: str = Field(default="std", description="Alphabet variant of the scheme")

    model_config = {"frozen": True}

    @field_validator("scheme", mode="before")
    @classmethod
    def normalize_scheme(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "hex":
                return "base16"
        return v

    @field_validator("alphabet", mode="before")
    @classmethod
    def normalize_alphabet(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v in ("standard", ""):
                return "std"
            if v == "url-safe":
                return "url"
        return v

    @model_validator(mode="after")
    def check_alphabet(self) -> 'CodecOptions':
        allowed = SCHEME_ALPHABETS[self.scheme]
        if self.alphabet not in allowed:
            raise ValueError(
                f"alphabet {self.alphabet!r} is not available for {self.scheme}; "
                f"expected one of {', '.join(allowed)}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"scheme": self.scheme, "alphabet": self.alphabet}


__all__ = ["CodecOptions", "SCHEME_ALPHABETS"]
