"""Plugin metadata, runtime context and the plugin entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Sequence


class Stage(str, Enum):
    """Release stage of a namespace or command."""

    GA = ""
    BETA = "beta"
    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"


@dataclass(frozen=True)
class VersionType:
    """A three-part version number."""

    major: int = 0
    minor: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


@dataclass(frozen=True)
class Namespace:
    """A group of commands sharing a common prefix."""

    name: str
    description: str = ""
    stage: Stage = Stage.GA


@dataclass(frozen=True)
class Command:
    """A command offered by a plugin."""

    name: str
    description: str = ""
    usage: str = ""
    namespace: str = ""
    alias: str = ""
    stage: Stage = Stage.GA


@dataclass(frozen=True)
class PluginMetadata:
    """Everything the host needs to know about a plugin."""

    name: str
    version: VersionType = field(default_factory=VersionType)
    min_cli_version: VersionType = field(default_factory=VersionType)
    namespaces: list[Namespace] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    delegate_bash_completion: bool = False


@dataclass
class QuotaDefinition:
    """Limits of an organization."""

    instance_memory_limit_in_mb: int = 0
    services_limit: int = 0


@dataclass
class Organization:
    """A targeted organization."""

    guid: str = ""
    name: str = ""
    quota_definition: QuotaDefinition = field(default_factory=QuotaDefinition)


@dataclass
class Space:
    """A targeted space."""

    guid: str = ""
    name: str = ""


@dataclass
class CFContext:
    """Cloud Foundry part of the plugin context."""

    api_endpoint: str = ""
    uaa_endpoint: str = ""
    doppler_endpoint: str = ""
    uaa_token: str = ""
    current_organization: Organization = field(default_factory=Organization)
    current_space: Space = field(default_factory=Space)

    def has_api_endpoint(self) -> bool:
        return bool(self.api_endpoint)

    def is_logged_in(self) -> bool:
        return bool(self.uaa_token)

    def has_targeted_space(self) -> bool:
        return bool(self.current_space.guid)


@dataclass
class PluginContext:
    """Runtime settings handed to a plugin by the host."""

    api_endpoint: str = ""
    iam_endpoint: str = ""
    user_email: str = ""
    cf: CFContext = field(default_factory=CFContext)
    color_enabled: bool = False
    http_timeout: int = 0
    trace: str = ""
    locale: str = ""
    ssl_disabled: bool = False


class Plugin(Protocol):
    def get_metadata(self) -> PluginMetadata: ...

    def run(self, context: PluginContext, args: list[str]) -> Any: ...


def start(plugin: Plugin, args: Sequence[str] | None = None, context: PluginContext | None = None) -> Any:
    """Run a plugin with the given arguments (default: the process arguments)."""
    if args is None:
        args = sys.argv[1:]
    if context is None:
        context = PluginContext()
    return plugin.run(context, list(args))