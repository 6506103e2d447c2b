from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class MetadataEntry(BaseModel):
    """One object of the JSON configuration array. Missing and null fields read as ""."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    pattern: str = ""
    pkg: str = ""
    vcs: str = ""
    repo: str = ""
    source: str = ""
    source_dir: str = Field("", alias="sourcedir")
    source_line: str = Field("", alias="sourceline")
    doc: str = ""
    body: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# A top-level `null` decodes to an empty table.
MetadataFile = TypeAdapter(Optional[List[MetadataEntry]])
