"""Small example plugins showing metadata, namespaces, stages and completion."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import TextIO

from .plugin import Command, Namespace, PluginContext, PluginMetadata, Stage, VersionType
from .ui import UI

_ROLES = ("Viewer", "Editor", "Operator", "Administrator")
_COMPLETION_SUBCOMMANDS = ("get-role", "set-role", "help")


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass
class HelloWorldPlugin:
    """Prints a greeting."""

    greeting: str = "Hi, this is my first plugin for IBM Cloud CLI."
    out: TextIO | None = None

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="hello-sample",
            version=VersionType(0, 0, 1),
            commands=[
                Command(
                    name="hello",
                    alias="hi",
                    description="Say hello to IBM Cloud.",
                    usage="ibmcloud hello",
                )
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(f"{self.greeting}\n")
        stream.flush()


class NamespaceDemo:
    """Commands grouped under a namespace."""

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="namespace-sample",
            version=VersionType(0, 0, 1),
            min_cli_version=VersionType(0, 0, 1),
            namespaces=[Namespace(name="ns", description="Demonstrate namespace.")],
            commands=[
                Command(namespace="ns", name="list", description="List resources.",
                        usage="ibmcloud ns list"),
                Command(namespace="ns", name="show", description="Show details of a resource.",
                        usage="ibmcloud ns show"),
                Command(namespace="ns", name="delete", description="Delete a resource.",
                        usage="ibmcloud ns delete"),
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] in ("list", "show", "delete"):
            print(f"Running command '{args[0]}'.")


class StageDemo:
    """Namespaces and commands annotated with a release stage."""

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="stage-demo",
            version=VersionType(0, 0, 1),
            namespaces=[
                Namespace(name="stage", description="Show example of stage annotation",
                          stage=Stage.BETA)
            ],
            commands=[
                Command(namespace="stage", name="list", description="List resources",
                        usage="ibmcloud stage list", stage=Stage.DEPRECATED),
                Command(namespace="stage", name="show",
                        description="Show the details of a resource",
                        usage="ibmcloud stage show", stage=Stage.EXPERIMENTAL),
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] in ("list", "show"):
            print(f"Running command '{args[0]}'.")


class AutoCompleteDelegationSample:
    """Answers shell completion requests delegated by the host."""

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="auto-complete-delegation-sample",
            version=VersionType(0, 0, 1),
            delegate_bash_completion=True,
            namespaces=[
                Namespace(name="autocomplete-sample",
                          description="Demonstrate delegate command completion to plugin.")
            ],
            commands=[
                Command(namespace="autocomplete-sample", name="get-role",
                        description="get user's role",
                        usage="ibmcloud autocomplete-sample get-role"),
                Command(namespace="autocomplete-sample", name="set-role",
                        description="set a user role (Viewer, Editor, Operator or Administrator)",
                        usage="ibmcloud autocomplete-sample set-role"),
                Command(namespace="autocomplete-sample", name="help",
                        description="show help",
                        usage="ibmcloud autocomplete-sample help"),
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] != "SendCompletion":
            print(f"Running command {_quote(args[0])}")
            return

        command = args[2] if len(args) > 2 and args[2] in _COMPLETION_SUBCOMMANDS else ""
        if not command:
            print("\n".join(_COMPLETION_SUBCOMMANDS))
        elif command == "set-role":
            print("\n".join(_ROLES))


class PrintContext:
    """Prints the plugin context as a table."""

    def __init__(self, ui: UI | None = None) -> None:
        self.ui = ui if ui is not None else UI()

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="context-sample",
            version=VersionType(0, 1, 0),
            min_cli_version=VersionType(0, 0, 1),
            commands=[
                Command(name="context", description="Print IBM Cloud plugin context",
                        usage="ibmcloud context")
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        cf = context.cf
        table = self.ui.table(["Name", "Value"])
        table.add("API endpoint", context.api_endpoint)
        table.add("IAM endpoint", context.iam_endpoint)
        table.add("Username", context.user_email)
        table.add("CC endpoint", cf.api_endpoint)
        table.add("UAA endpoint", cf.uaa_endpoint)
        table.add("Doppler logging endpoint", cf.doppler_endpoint)
        table.add("Org", cf.current_organization.name)
        table.add("Space", cf.current_space.name)
        table.add("Color enabled", "true" if context.color_enabled else "false")
        table.add("HTTP timeout (second)", str(context.http_timeout))
        table.add("Trace", context.trace)
        table.add("Locale", context.locale)
        table.print()