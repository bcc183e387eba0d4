from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Record(BaseModel):
    """
    The persisted `{name, value}` document:
      { "name": "<string>", "value": <int32> }
    """

    # Strict: "42" is not a value and 42 is not a name. Unknown keys are ignored.
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    value: int = Field(ge=INT32_MIN, le=INT32_MAX)

    def to_disk_doc(self) -> dict[str, object]:
        return {"name": self.name, "value": self.value}
