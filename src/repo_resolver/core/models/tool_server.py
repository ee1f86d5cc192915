"""Tool-server (MCP) launch models."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator


class ToolServerTemplate(BaseModel):
    """Static launch template containing ``${NAME}`` placeholders.

    Templates are shared registry entries, so ``env`` is stored read-only.
    """

    command: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] | None = None

    class Config:
        frozen = True

    @field_validator("env")
    @classmethod
    def _freeze_env(cls, value: Mapping[str, str] | None) -> Mapping[str, str] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))


class ToolServerInvocation(BaseModel):
    """A filled-in tool-server launch descriptor, ready for a process spawner."""

    command: str
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] | None = None
