"""The list command: apps, services and containers of the targeted space."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from .i18n import translate
from .models import (
    AppsAndServices,
    App,
    Container,
    ContainersQuotaAndUsage,
    OrgUsage,
    ServiceInstance,
)
from .plugin import CFContext, PluginContext
from .ui import BOLD, FG_YELLOW, UI, colorize, command_color


class CommandError(Exception):
    """A command could not complete."""


class _CCClient(Protocol):
    def apps_and_services(self, space_id: str) -> AppsAndServices: ...

    def org_usage(self, org_id: str) -> OrgUsage: ...


class _ContainerClient(Protocol):
    def containers(self, space_id: str) -> list[Container]: ...

    def containers_quota_and_usage(self, space_id: str) -> ContainersQuotaAndUsage: ...


def formatted_gb(size_in_mb: int) -> str:
    """Format a size in MB as gigabytes with at most two decimals."""
    return f"{size_in_mb / 1024:.2f}".rstrip("0").rstrip(".") + " GB"


def check_target(cf: CFContext) -> None:
    """Raise CommandError unless an endpoint, a login and a space are set."""
    if not cf.has_api_endpoint():
        raise CommandError(translate(
            "No CF API endpoint set. Use '{{.Command}}' to target a CloudFoundry environment.",
            {"Command": command_color("bx target --cf")},
        ))
    if not cf.is_logged_in():
        raise CommandError(translate(
            "Not logged in. Use '{{.Command}}' to log in.",
            {"Command": command_color("bx target --cf")},
        ))
    if not cf.has_targeted_space():
        raise CommandError(translate(
            "No space targeted. Use '{{.Command}}' to target an org and a space.",
            {"Command": command_color("bx target -o ORG -s SPACE")},
        ))


def _title(text: str) -> str:
    return colorize(text, FG_YELLOW, BOLD)


class ListCommand:
    """Lists apps, services and containers in the targeted space."""

    def __init__(
        self,
        ui: UI,
        context: PluginContext,
        cc_client: _CCClient,
        container_client: _ContainerClient,
    ) -> None:
        self.ui = ui
        self.cf = context.cf
        self.cc_client = cc_client
        self.container_client = container_client

    def _query(self, message_id: str, call: Any, *args: Any) -> Any:
        try:
            return call(*args)
        except Exception as exc:
            raise CommandError(translate(message_id) + str(exc)) from exc

    def run(self, args: Sequence[str] = ()) -> None:
        check_target(self.cf)

        org_id = self.cf.current_organization.guid
        space_id = self.cf.current_space.guid

        summary = self._query(
            "Unable to query apps and services of the target space:\n",
            self.cc_client.apps_and_services, space_id,
        )
        org_usage = self._query(
            "Unable to retrieve usage of the target org:\n",
            self.cc_client.org_usage, org_id,
        )

        self._print_apps(summary.apps, org_usage)
        self._print_services(summary.services, org_usage)

        containers = self._query(
            "Unable to query containers of the target space:\n",
            self.container_client.containers, space_id,
        )
        quota_and_usage = self._query(
            "Unable to retrieve containers' usage and quota of the target space:\n",
            self.container_client.containers_quota_and_usage, space_id,
        )

        self._print_containers(containers, quota_and_usage)

    def _print_apps(self, apps: list[App], org_usage: OrgUsage) -> None:
        quota = self.cf.current_organization.quota_definition
        self.ui.say(_title(translate(
            "CloudFoundy Applications  {{.Used}}/{{.Limit}} used",
            {
                "Used": formatted_gb(org_usage.total_memory_used()),
                "Limit": formatted_gb(quota.instance_memory_limit_in_mb),
            },
        )))

        table = self.ui.table([
            translate("Name"), translate("Routes"), translate("Memory (MB)"),
            translate("Instances"), translate("State"),
        ])
        for app in apps:
            table.add(
                app.name,
                "\n".join(app.urls),
                str(app.memory),
                f"{app.running_instances}/{app.total_instances}",
                app.state,
            )
        table.print()
        self.ui.say("")

    def _print_services(self, services: list[ServiceInstance], org_usage: OrgUsage) -> None:
        quota = self.cf.current_organization.quota_definition
        self.ui.say(_title(translate(
            "Services {{.Count}}/{{.Limit}} used",
            {"Count": org_usage.services_count(), "Limit": quota.services_limit},
        )))

        table = self.ui.table([translate("Name"), translate("Service Offering"), translate("Plan")])
        for service in services:
            table.add(
                service.name,
                service.service_plan.service_offering.label,
                service.service_plan.name,
            )
        table.print()
        self.ui.say("")

    def _print_containers(
        self, containers: list[Container], quota_and_usage: ContainersQuotaAndUsage
    ) -> None:
        usage = quota_and_usage.usage
        limits = quota_and_usage.limits
        self.ui.say(_title(translate(
            "Containers  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}} "
            "Public IPs Requested|{{.BoundIPCount}} Used",
            {
                "MemoryUsed": formatted_gb(usage.memory_in_mb),
                "MemoryLimit": formatted_gb(limits.memory_limit_in_mb),
                "IPCount": usage.floating_ips_count,
                "IPLimit": limits.floating_ip_count_limit,
                "BoundIPCount": usage.bound_floating_ips_count,
            },
        )))

        by_name: dict[str, list[Container]] = {}
        for container in containers:
            by_name.setdefault(container.group.name or container.name, []).append(container)

        table = self.ui.table([
            translate("Name"), translate("Instances"), translate("Image"),
            translate("Created"), translate("Status"),
        ])
        for name, group in by_name.items():
            first = group[0]
            image = first.image.split("/")[-1]
            created = "--" if len(group) > 1 else str(first.created)
            states = {container.state for container in group}
            status = first.state if len(states) == 1 else "??"
            table.add(name, str(len(group)), image, created, status)
        table.print()
        self.ui.say("")