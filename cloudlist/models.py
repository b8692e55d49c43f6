"""Data returned by the Cloud Foundry and container services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_MISSING = object()


def _field(data: Any, key: str, default: Any = None) -> Any:
    """Look a key up, exactly first and then ignoring case; null gives the default."""
    if not isinstance(data, Mapping):
        return default
    value = data.get(key, _MISSING)
    if value is _MISSING:
        folded = key.casefold()
        value = next(
            (v for k, v in data.items() if isinstance(k, str) and k.casefold() == folded),
            _MISSING,
        )
    if value is _MISSING or value is None:
        return default
    return value


def _int(data: Any, key: str) -> int:
    return int(_field(data, key, 0))


def _str(data: Any, key: str) -> str:
    return str(_field(data, key, ""))


def _list(data: Any, key: str) -> list:
    return list(_field(data, key, []))


@dataclass
class App:
    name: str = ""
    urls: list[str] = field(default_factory=list)
    memory: int = 0
    total_instances: int = 0
    running_instances: int = 0
    is_diego: bool = False
    state: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "App":
        return cls(
            name=_str(data, "Name"),
            urls=[str(url) for url in _list(data, "urls")],
            memory=_int(data, "memory"),
            total_instances=_int(data, "instances"),
            running_instances=_int(data, "running_instances"),
            is_diego=bool(_field(data, "diego", False)),
            state=_str(data, "State"),
        )


@dataclass
class ServiceOffering:
    label: str = ""


@dataclass
class ServicePlan:
    name: str = ""
    service_offering: ServiceOffering = field(default_factory=ServiceOffering)


@dataclass
class ServiceInstance:
    name: str = ""
    service_plan: ServicePlan = field(default_factory=ServicePlan)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ServiceInstance":
        plan = _field(data, "service_plan", {})
        offering = _field(plan, "service", {})
        return cls(
            name=_str(data, "Name"),
            service_plan=ServicePlan(
                name=_str(plan, "Name"),
                service_offering=ServiceOffering(label=_str(offering, "Label")),
            ),
        )


@dataclass
class AppsAndServices:
    apps: list[App] = field(default_factory=list)
    services: list[ServiceInstance] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AppsAndServices":
        return cls(
            apps=[App.from_json(item) for item in _list(data, "Apps")],
            services=[ServiceInstance.from_json(item) for item in _list(data, "Services")],
        )


@dataclass
class SpaceUsage:
    space: str = ""
    apps: int = 0
    services: int = 0
    memory_in_dev: int = 0
    memory_in_prod: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SpaceUsage":
        return cls(
            space=_str(data, "name"),
            apps=_int(data, "app_count"),
            services=_int(data, "service_count"),
            memory_in_dev=_int(data, "mem_dev_total"),
            memory_in_prod=_int(data, "mem_prod_total"),
        )


@dataclass
class OrgUsage:
    org: str = ""
    spaces: list[SpaceUsage] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "OrgUsage":
        return cls(
            org=_str(data, "name"),
            spaces=[SpaceUsage.from_json(item) for item in _list(data, "Spaces")],
        )

    def total_memory_used(self) -> int:
        return sum(s.memory_in_dev + s.memory_in_prod for s in self.spaces)

    def apps_count(self) -> int:
        return sum(s.apps for s in self.spaces)

    def services_count(self) -> int:
        return sum(s.services for s in self.spaces)


@dataclass
class ContainerGroup:
    name: str = ""


@dataclass
class Container:
    name: str = ""
    group: ContainerGroup = field(default_factory=ContainerGroup)
    memory: int = 0
    created: int = 0
    image: str = ""
    state: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Container":
        return cls(
            name=_str(data, "Name"),
            group=ContainerGroup(name=_str(_field(data, "Group", {}), "Name")),
            memory=_int(data, "Memory"),
            created=_int(data, "Created"),
            image=_str(data, "Image"),
            state=_str(data, "ContainerState"),
        )


@dataclass
class ContainersQuota:
    instances_count_limit: int = 0
    cpu_count_limit: int = 0
    memory_limit_in_mb: int = 0
    floating_ip_count_limit: int = 0


@dataclass
class ContainersUsage:
    total_instances: int = 0
    running_instances: int = 0
    cpu_count: int = 0
    memory_in_mb: int = 0
    floating_ips_count: int = 0
    bound_floating_ips_count: int = 0


@dataclass
class ContainersQuotaAndUsage:
    limits: ContainersQuota = field(default_factory=ContainersQuota)
    usage: ContainersUsage = field(default_factory=ContainersUsage)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ContainersQuotaAndUsage":
        limits = _field(data, "Limits", {})
        usage = _field(data, "Usage", {})
        return cls(
            limits=ContainersQuota(
                instances_count_limit=_int(limits, "containers"),
                cpu_count_limit=_int(limits, "vcpu"),
                memory_limit_in_mb=_int(limits, "memory_MB"),
                floating_ip_count_limit=_int(limits, "floating_ips"),
            ),
            usage=ContainersUsage(
                total_instances=_int(usage, "containers"),
                running_instances=_int(usage, "running"),
                cpu_count=_int(usage, "vcpu"),
                memory_in_mb=_int(usage, "memory_MB"),
                floating_ips_count=_int(usage, "floating_ips"),
                bound_floating_ips_count=_int(usage, "floating_ips_bound"),
            ),
        )