import pytest

from cloudlist.fakes import FakeCCClient, FakeContainerClient
from cloudlist.models import (
    App,
    AppsAndServices,
    Container,
    ContainersQuota,
    ContainersQuotaAndUsage,
    OrgUsage,
    SpaceUsage,
)


def test_cc_unconfigured_returns_empty_values():
    fake = FakeCCClient()
    assert fake.apps_and_services("space-a") == AppsAndServices()
    assert fake.org_usage("org-a") == OrgUsage()


def test_cc_apps_and_services_records_calls_and_returns_result():
    fake = FakeCCClient()
    result = AppsAndServices(apps=[App(name="app1")])
    fake.apps_and_services_returns(result, None)

    assert fake.apps_and_services("space-a") is result
    assert fake.apps_and_services("space-b") is result
    assert fake.apps_and_services_calls == ["space-a", "space-b"]
    assert fake.apps_and_services_call_count == len(fake.apps_and_services_calls)


def test_cc_apps_and_services_raises_configured_error():
    fake = FakeCCClient()
    fake.apps_and_services_returns(AppsAndServices(), RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        fake.apps_and_services("space-a")
    assert fake.apps_and_services_calls == ["space-a"]


def test_cc_org_usage_stub_takes_precedence():
    fake = FakeCCClient()
    fake.org_usage_returns(OrgUsage(org="ignored"), None)
    fake.org_usage_stub = lambda org_id: OrgUsage(org=org_id)

    assert fake.org_usage("org1").org == "org1"
    assert fake.org_usage_calls == ["org1"]


def test_cc_returns_clears_stub():
    fake = FakeCCClient()
    fake.org_usage_stub = lambda org_id: OrgUsage(org="from-stub")
    usage = OrgUsage(org="org1", spaces=[SpaceUsage(space="space1")])
    fake.org_usage_returns(usage, None)

    assert fake.org_usage_stub is None
    assert fake.org_usage("org-x") is usage
    assert fake.org_usage_call_count == len(fake.org_usage_calls)


def test_container_unconfigured_returns_empty_values():
    fake = FakeContainerClient()
    assert fake.containers("space-a") == []
    assert fake.containers_quota_and_usage("space-a") == ContainersQuotaAndUsage()


def test_container_containers_returns_result_and_records():
    fake = FakeContainerClient()
    items = [Container(name="container1"), Container(name="container2")]
    fake.containers_returns(items, None)

    assert fake.containers("space-id") is items
    assert fake.containers_calls == ["space-id"]
    assert fake.containers_call_count == len(fake.containers_calls)


def test_container_containers_error():
    fake = FakeContainerClient()
    fake.containers_returns([], ValueError("bad"))

    with pytest.raises(ValueError, match="bad"):
        fake.containers("space-id")


def test_container_quota_stub_and_returns():
    fake = FakeContainerClient()
    quota = ContainersQuotaAndUsage(limits=ContainersQuota(memory_limit_in_mb=20480))
    fake.containers_quota_and_usage_stub = lambda space_id: quota

    assert fake.containers_quota_and_usage("space-1") is quota
    other = ContainersQuotaAndUsage()
    fake.containers_quota_and_usage_returns(other, None)
    assert fake.containers_quota_and_usage("space-2") is other
    assert fake.containers_quota_and_usage_calls == ["space-1", "space-2"]
    assert fake.containers_quota_and_usage_call_count == len(
        fake.containers_quota_and_usage_calls
    )