from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ViteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    manifest_path: str = ""
    base_path: str = ""
    server_url: str = ""
    dev_enabled: bool = False

    @field_validator("manifest_path", "base_path", "server_url", mode="before")
    @classmethod
    def empty_string_when_unset(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("dev_enabled", mode="before")
    @classmethod
    def disabled_when_unset(cls, value: Any) -> Any:
        return False if value is None else value
