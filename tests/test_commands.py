import io

import pytest

from cloudlist.commands import CommandError, ListCommand, check_target, formatted_gb
from cloudlist.fakes import FakeCCClient, FakeContainerClient
from cloudlist.i18n import init, set_translator
from cloudlist.models import (
    App,
    AppsAndServices,
    Container,
    ContainerGroup,
    ContainersQuota,
    ContainersQuotaAndUsage,
    ContainersUsage,
    OrgUsage,
    ServiceInstance,
    ServiceOffering,
    ServicePlan,
    SpaceUsage,
)
from cloudlist.plugin import (
    CFContext,
    Organization,
    PluginContext,
    QuotaDefinition,
    Space,
)
from cloudlist.ui import UI


@pytest.fixture(autouse=True)
def english():
    set_translator(init("", {}))
    yield
    set_translator(None)


@pytest.fixture
def cf():
    return CFContext(
        api_endpoint="https://api.example.com",
        uaa_token="token",
        current_organization=Organization(
            guid="org-guid",
            quota_definition=QuotaDefinition(instance_memory_limit_in_mb=2048, services_limit=10),
        ),
        current_space=Space(guid="space-guid"),
    )


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def cc_client():
    client = FakeCCClient()
    client.apps_and_services_returns(AppsAndServices(
        apps=[
            App(name="app1", urls=["https://app1.example.com"], memory=512,
                total_instances=2, running_instances=1, is_diego=True, state="STARTED"),
            App(name="app2", urls=["https://app2.example.com", "https://app2.another.com"],
                memory=256, total_instances=1, running_instances=0, is_diego=False,
                state="STOPPED"),
        ],
        services=[
            ServiceInstance(
                name="service1-instance1",
                service_plan=ServicePlan(
                    name="plan1", service_offering=ServiceOffering(label="service1")
                ),
            )
        ],
    ), None)
    client.org_usage_returns(OrgUsage(
        org="org1",
        spaces=[
            SpaceUsage(space="space1", apps=2, services=1, memory_in_dev=1028, memory_in_prod=512),
            SpaceUsage(space="space2", apps=1, services=1, memory_in_dev=256, memory_in_prod=0),
        ],
    ), None)
    return client


@pytest.fixture
def container_client():
    client = FakeContainerClient()
    client.containers_returns([
        Container(name="container1", group=ContainerGroup(name="group1"), memory=256,
                  created=1484718271, image="registry/image1", state="Running"),
        Container(name="container2", group=ContainerGroup(name="group1"), memory=256,
                  created=1484718271, image="registry/image1", state="Running"),
        Container(name="container3", memory=512, created=1484718271,
                  image="registry/image2", state="Shutdown"),
    ], None)
    client.containers_quota_and_usage_returns(ContainersQuotaAndUsage(
        limits=ContainersQuota(instances_count_limit=10, cpu_count_limit=-1,
                               memory_limit_in_mb=20480, floating_ip_count_limit=2),
        usage=ContainersUsage(total_instances=3, running_instances=1, cpu_count=6,
                              memory_in_mb=1024, floating_ips_count=2,
                              bound_floating_ips_count=1),
    ), None)
    return client


def make_command(cf, out, cc_client, container_client):
    ui = UI(out=out, err=io.StringIO())
    return ListCommand(ui, PluginContext(cf=cf), cc_client, container_client)


def test_fails_without_api_endpoint(cf, out, cc_client, container_client):
    cf.api_endpoint = ""
    with pytest.raises(CommandError) as excinfo:
        make_command(cf, out, cc_client, container_client).run([])
    assert "No CF API endpoint set" in str(excinfo.value)


def test_fails_when_not_logged_in(cf, out, cc_client, container_client):
    cf.uaa_token = ""
    with pytest.raises(CommandError) as excinfo:
        make_command(cf, out, cc_client, container_client).run([])
    assert "Not logged in" in str(excinfo.value)
    assert "bx target --cf" in str(excinfo.value)


def test_fails_without_targeted_space(cf, out, cc_client, container_client):
    cf.current_space = Space()
    with pytest.raises(CommandError) as excinfo:
        make_command(cf, out, cc_client, container_client).run([])
    assert "No space targeted" in str(excinfo.value)


def test_lists_apps(cf, out, cc_client, container_client):
    make_command(cf, out, cc_client, container_client).run([])
    output = out.getvalue()
    assert "CloudFoundy Applications  1.75 GB/2 GB used" in output
    assert "Name   Routes                     Memory (MB)   Instances   State" in output
    assert "app1   https://app1.example.com   512           1/2         STARTED" in output
    assert "app2   https://app2.example.com   256           0/1         STOPPED" in output
    assert "       https://app2.another.com" in output


def test_lists_services(cf, out, cc_client, container_client):
    make_command(cf, out, cc_client, container_client).run([])
    output = out.getvalue()
    assert "Services 2/10 used" in output
    assert "Name                 Service Offering   Plan" in output
    assert "service1-instance1   service1           plan1" in output


def test_lists_containers(cf, out, cc_client, container_client):
    make_command(cf, out, cc_client, container_client).run([])
    output = out.getvalue()
    assert "Containers  1 GB/20 GB  2/2 Public IPs Requested|1 Used" in output
    assert "Name         Instances   Image    Created      Status" in output
    assert "group1       2           image1   --           Running" in output
    assert "container3   1           image2   1484718271   Shutdown" in output


def test_queries_with_targeted_ids(cf, out, cc_client, container_client):
    make_command(cf, out, cc_client, container_client).run([])
    assert cc_client.apps_and_services_calls == ["space-guid"]
    assert cc_client.org_usage_calls == ["org-guid"]
    assert container_client.containers_calls == ["space-guid"]
    assert container_client.containers_quota_and_usage_calls == ["space-guid"]


def test_mixed_states_in_group_show_unknown(cf, out, cc_client, container_client):
    container_client.containers_returns([
        Container(name="c1", group=ContainerGroup(name="grp"), image="r/img", state="Running"),
        Container(name="c2", group=ContainerGroup(name="grp"), image="r/img", state="Shutdown"),
    ], None)
    make_command(cf, out, cc_client, container_client).run([])
    line = next(l for l in out.getvalue().splitlines() if l.startswith("grp"))
    assert line.split() == ["grp", "2", "img", "--", "??"]


def test_apps_query_error_is_wrapped(cf, out, cc_client, container_client):
    cc_client.apps_and_services_returns(AppsAndServices(), RuntimeError("server down"))
    with pytest.raises(CommandError) as excinfo:
        make_command(cf, out, cc_client, container_client).run([])
    assert str(excinfo.value) == (
        "Unable to query apps and services of the target space:\nserver down"
    )


def test_container_usage_error_is_wrapped(cf, out, cc_client, container_client):
    container_client.containers_quota_and_usage_returns(
        ContainersQuotaAndUsage(), RuntimeError("quota gone")
    )
    with pytest.raises(CommandError) as excinfo:
        make_command(cf, out, cc_client, container_client).run([])
    assert str(excinfo.value).endswith("quota gone")
    assert "containers' usage and quota" in str(excinfo.value)


def test_check_target_passes_when_ready(cf):
    assert check_target(cf) is None
    cf.api_endpoint = ""
    with pytest.raises(CommandError):
        check_target(cf)


@pytest.mark.parametrize(
    "size, expected",
    [(1796, "1.75 GB"), (2048, "2 GB"), (1024, "1 GB"), (20480, "20 GB")],
)
def test_formatted_gb(size, expected):
    assert formatted_gb(size) == expected