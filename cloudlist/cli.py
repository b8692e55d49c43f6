"""The list plugin: wires the clients, the UI and the list command together."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Sequence

import requests

from .api import CCClient, ContainerClient, RestClient
from .commands import CommandError, ListCommand
from .i18n import init as init_translator
from .i18n import set_translator
from .plugin import CFContext, Command, PluginContext, PluginMetadata, VersionType, start
from .ui import UI

_ENDPOINT_HOST = re.compile(r"(^https?://)?[^\.]+(\..+)+")


def container_endpoint(api_endpoint: str) -> str:
    """Derive the container service endpoint from the Cloud Foundry API endpoint."""
    return _ENDPOINT_HOST.sub(
        lambda m: f"{m.group(1) or ''}containers-api{m.group(2) or ''}", api_endpoint
    )


def new_http_client(context: PluginContext) -> requests.Session:
    """Build an HTTP session honouring proxy settings and the SSL switch."""
    session = requests.Session()
    session.trust_env = True
    session.verify = not context.ssl_disabled
    return session


def default_headers(cf: CFContext) -> dict[str, str]:
    """Headers sent with every request: the (refreshed) UAA token."""
    refresh = getattr(cf, "refresh_uaa_token", None)
    if callable(refresh):
        try:
            refresh()
        except Exception as exc:  # the request is still attempted with the old token
            print(str(exc))
    return {"Authorization": cf.uaa_token}


@dataclass
class ListPlugin:
    """Lists apps, services and containers in the targeted space."""

    ui: UI | None = None

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="ibmcloud-list",
            version=VersionType(0, 0, 1),
            commands=[
                Command(
                    name="list",
                    description="List your apps, containers and services in the target space.",
                    usage="ibmcloud list",
                )
            ],
        )

    def _setup(self, context: PluginContext) -> UI:
        set_translator(init_translator(context.locale))
        ui = self.ui if self.ui is not None else UI()
        ui.color = context.color_enabled
        return ui

    def run(self, context: PluginContext, args: list[str]) -> None:
        """Run a command; exit with status 1 when it fails."""
        ui = self._setup(context)
        if not args or args[0] != "list":
            return

        cf = context.cf
        client = RestClient(
            session=new_http_client(context),
            default_headers=default_headers(cf),
            timeout=context.http_timeout or None,
        )
        command = ListCommand(
            ui,
            context,
            CCClient(cf.api_endpoint, client),
            ContainerClient(container_endpoint(cf.api_endpoint), client),
        )
        try:
            command.run(args[1:])
        except CommandError as exc:
            ui.failed(f"{exc}\n")
            raise SystemExit(1) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Start the list plugin with the given arguments."""
    start(ListPlugin(), list(sys.argv[1:] if argv is None else argv))
    return 0