"""
Schema for legal-district (법정동) code records.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
import re


CODE_PATTERN = re.compile(r"^[0-9]{10}$")

# Deepest non-zero code segment -> administrative level
LEVELS = ("city", "district", "town", "village")


def remove_tail_code(code: str) -> str:
    """Strip trailing zero padding from a code, keeping an even length.

    1100000000 -> 11, 1111010100 -> 11110101, 4111100000 -> 411110
    """
    stripped = code.rstrip("0")
    return stripped if len(stripped) % 2 == 0 else stripped + "0"


class AdministrativeArea(BaseModel):
    """A single administrative area decoded from one registry row."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_code: str = Field(alias="fullCode")
    full_name: str = Field(alias="fullName")
    city_code: str = Field(alias="cityCode")
    sub_code: str = Field(alias="subCode")
    sub2_code: str = Field(alias="sub2Code")
    code: str
    name: str
    type: str
    is_alive: bool = Field(alias="isAlive")

    @field_validator("full_code")
    @classmethod
    def validate_full_code(cls, v: str) -> str:
        """Ensure the code is exactly 10 digits."""
        if not CODE_PATTERN.match(v):
            raise ValueError(f"Invalid code format: {v}")
        return v

    @field_validator("city_code", "sub_code", "sub2_code", "code")
    @classmethod
    def validate_segment(cls, v: str) -> str:
        if not v.isascii() or not v.isdigit():
            raise ValueError(f"Invalid code segment: {v}")
        return v

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Unit type is the single trailing character of the name."""
        if len(v) != 1:
            raise ValueError(f"Type must be a single character: {v!r}")
        return v

    @model_validator(mode="after")
    def check_segments(self) -> "AdministrativeArea":
        """Segments must rebuild the full code at offsets 2, 5, 8."""
        joined = self.city_code + self.sub_code + self.sub2_code + self.code
        if joined != self.full_code:
            raise ValueError(f"Segments {joined} do not match code {self.full_code}")
        return self

    @property
    def short_code(self) -> str:
        return remove_tail_code(self.full_code)

    @property
    def level(self) -> str:
        """Administrative level of the deepest non-zero code segment."""
        if self.code != "00":
            return "village"
        if self.sub2_code != "000":
            return "town"
        if self.sub_code != "000":
            return "district"
        return "city"

    def to_json_dict(self) -> dict:
        """Serialize with the registry's camelCase field names."""
        return self.model_dump(by_alias=True)
