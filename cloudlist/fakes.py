"""Recording stand-ins for the service clients."""

from __future__ import annotations

import threading
from typing import Callable

from .models import AppsAndServices, Container, ContainersQuotaAndUsage, OrgUsage


class FakeCCClient:
    """Records calls and answers with configured results, errors or stubs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.apps_and_services_stub: Callable[[str], AppsAndServices] | None = None
        self.apps_and_services_calls: list[str] = []
        self._apps_and_services_result = AppsAndServices()
        self._apps_and_services_error: Exception | None = None
        self.org_usage_stub: Callable[[str], OrgUsage] | None = None
        self.org_usage_calls: list[str] = []
        self._org_usage_result = OrgUsage()
        self._org_usage_error: Exception | None = None

    @property
    def apps_and_services_call_count(self) -> int:
        with self._lock:
            return len(self.apps_and_services_calls)

    @property
    def org_usage_call_count(self) -> int:
        with self._lock:
            return len(self.org_usage_calls)

    def apps_and_services(self, space_id: str) -> AppsAndServices:
        with self._lock:
            self.apps_and_services_calls.append(space_id)
        if self.apps_and_services_stub is not None:
            return self.apps_and_services_stub(space_id)
        if self._apps_and_services_error is not None:
            raise self._apps_and_services_error
        return self._apps_and_services_result

    def apps_and_services_returns(
        self, result: AppsAndServices, error: Exception | None = None
    ) -> None:
        self.apps_and_services_stub = None
        self._apps_and_services_result = result
        self._apps_and_services_error = error

    def org_usage(self, org_id: str) -> OrgUsage:
        with self._lock:
            self.org_usage_calls.append(org_id)
        if self.org_usage_stub is not None:
            return self.org_usage_stub(org_id)
        if self._org_usage_error is not None:
            raise self._org_usage_error
        return self._org_usage_result

    def org_usage_returns(self, result: OrgUsage, error: Exception | None = None) -> None:
        self.org_usage_stub = None
        self._org_usage_result = result
        self._org_usage_error = error


class FakeContainerClient:
    """Records calls and answers with configured results, errors or stubs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.containers_stub: Callable[[str], list[Container]] | None = None
        self.containers_calls: list[str] = []
        self._containers_result: list[Container] = []
        self._containers_error: Exception | None = None
        self.containers_quota_and_usage_stub: Callable[[str], ContainersQuotaAndUsage] | None = None
        self.containers_quota_and_usage_calls: list[str] = []
        self._containers_quota_and_usage_result = ContainersQuotaAndUsage()
        self._containers_quota_and_usage_error: Exception | None = None

    @property
    def containers_call_count(self) -> int:
        with self._lock:
            return len(self.containers_calls)

    @property
    def containers_quota_and_usage_call_count(self) -> int:
        with self._lock:
            return len(self.containers_quota_and_usage_calls)

    def containers(self, space_id: str) -> list[Container]:
        with self._lock:
            self.containers_calls.append(space_id)
        if self.containers_stub is not None:
            return self.containers_stub(space_id)
        if self._containers_error is not None:
            raise self._containers_error
        return self._containers_result

    def containers_returns(self, result: list[Container], error: Exception | None = None) -> None:
        self.containers_stub = None
        self._containers_result = result
        self._containers_error = error

    def containers_quota_and_usage(self, space_id: str) -> ContainersQuotaAndUsage:
        with self._lock:
            self.containers_quota_and_usage_calls.append(space_id)
        if self.containers_quota_and_usage_stub is not None:
            return self.containers_quota_and_usage_stub(space_id)
        if self._containers_quota_and_usage_error is not None:
            raise self._containers_quota_and_usage_error
        return self._containers_quota_and_usage_result

    def containers_quota_and_usage_returns(
        self, result: ContainersQuotaAndUsage, error: Exception | None = None
    ) -> None:
        self.containers_quota_and_usage_stub = None
        self._containers_quota_and_usage_result = result
        self._containers_quota_and_usage_error = error