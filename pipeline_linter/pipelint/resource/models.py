"""Data models for pipeline manifest resources."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Node(BaseModel):
    """Base for manifest nodes: tolerate unknown keys, accept field names or YAML keys."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Platform(_Node):
    """Target operating system and CPU architecture. Empty means default."""

    os: str = ""
    arch: str = ""
    variant: str = ""
    version: str = ""


class VolumeHostPath(_Node):
    path: str = ""


class VolumeEmptyDir(_Node):
    medium: str = ""
    size_limit: int = 0


class Volume(_Node):
    """A pipeline volume: either a host path mount or a temporary directory."""

    name: str = ""
    host_path: VolumeHostPath | None = Field(default=None, alias="host")
    empty_dir: VolumeEmptyDir | None = Field(default=None, alias="temp")

    @property
    def is_host_path(self) -> bool:
        return self.host_path is not None

    @property
    def is_in_memory(self) -> bool:
        return self.empty_dir is not None and self.empty_dir.medium == "memory"


class PortMapping(_Node):
    port: int = 0
    host: int | None = None
    protocol: str = ""


class VolumeDevice(_Node):
    name: str = ""
    path: str = ""


class VolumeMount(_Node):
    name: str = ""
    path: str = ""


class Container(_Node):
    """A step or service container."""

    name: str = ""
    image: str = ""
    pull: str = ""
    detach: bool = False
    privileged: bool = False
    commands: list[str] = Field(default_factory=list)
    environment: dict[str, Any] = Field(default_factory=dict)
    devices: list[VolumeDevice] = Field(default_factory=list)
    ports: list[PortMapping] = Field(default_factory=list)
    dns: list[str] = Field(default_factory=list)
    dns_search: list[str] = Field(default_factory=list)
    extra_hosts: list[str] = Field(default_factory=list)
    network_mode: str = ""
    volumes: list[VolumeMount] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)

    @field_validator("ports", mode="before")
    @classmethod
    def _expand_port_shorthand(cls, value: Any) -> Any:
        # `ports: [80, {port: 443, host: 8443}]`
        if value is None:
            return []
        if isinstance(value, list):
            return [{"port": v} if isinstance(v, int) else v for v in value]
        return value

    @field_validator(
        "commands", "devices", "dns", "dns_search", "extra_hosts", "volumes", "depends_on",
        mode="before",
    )
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("environment", mode="before")
    @classmethod
    def _null_environment(cls, value: Any) -> Any:
        return {} if value is None else value


class BuildStep(_Node):
    """Image build template applied to the pipeline."""

    image: str = ""
    context: str = ""
    dockerfile: str = ""
    args: dict[str, Any] = Field(default_factory=dict)


class Pipeline(_Node):
    """A single pipeline resource (``kind: pipeline``)."""

    kind: Literal["pipeline"] = "pipeline"
    type: str = ""
    name: str = ""
    platform: Platform = Field(default_factory=Platform)
    build: BuildStep | None = None
    volumes: list[Volume] = Field(default_factory=list)
    services: list[Container] = Field(default_factory=list)
    steps: list[Container] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)

    @field_validator("platform", mode="before")
    @classmethod
    def _null_platform(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("volumes", "services", "steps", "depends_on", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Secret(_Node):
    kind: Literal["secret"] = "secret"
    type: str = ""
    name: str = ""
    data: str = ""


class Signature(_Node):
    kind: Literal["signature"] = "signature"
    hmac: str = ""


Resource = Union[Pipeline, Secret, Signature]


class Manifest(BaseModel):
    """All resources parsed from one YAML file, in document order."""

    resources: list[Resource] = Field(default_factory=list)
