"""Clients for the Cloud Foundry controller and the container service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import requests

from .models import AppsAndServices, Container, ContainersQuotaAndUsage, OrgUsage


def _lookup(data: Any, key: str, default: Any) -> Any:
    """Find a key exactly or ignoring case; a missing key or null gives the default."""
    if not isinstance(data, Mapping):
        return default
    if key in data:
        value = data[key]
    else:
        folded = key.casefold()
        value = next(
            (v for k, v in data.items() if isinstance(k, str) and k.casefold() == folded),
            None,
        )
    return default if value is None else value


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class RestClient:
    """Sends GET requests and decodes JSON bodies."""

    def __init__(
        self,
        session: requests.Session | None = None,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.default_headers = dict(default_headers or {})
        self.timeout = timeout

    def get_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> tuple[int, Any]:
        """Return the status code and the decoded body (None when the body is empty)."""
        merged = {**self.default_headers, **(headers or {})}
        response = self.session.get(url, headers=merged, params=params, timeout=self.timeout)
        status = response.status_code
        if not response.content.strip():
            return status, None
        try:
            data = response.json()
        except ValueError as exc:
            if _is_success(status):
                raise
            raise requests.HTTPError(
                f"Unexpected response from {url}, status code: {status}", response=response
            ) from exc
        return status, data


@dataclass
class CCError(Exception):
    """Error reported by the Cloud Foundry controller."""

    code: int = 0
    description: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "CCError":
        return cls(
            code=int(_lookup(data, "code", 0)),
            description=str(_lookup(data, "description", "")),
        )

    def __str__(self) -> str:
        return (
            f"Error response from server. Status code: {self.code}; "
            f"description: {self.description}."
        )


@dataclass
class ContainerError(Exception):
    """Error reported by the container service."""

    code: str = ""
    status_code: str = ""
    description: str = ""
    incident_id: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "ContainerError":
        return cls(
            code=str(_lookup(data, "code", "")),
            status_code=str(_lookup(data, "rc", "")),
            description=str(_lookup(data, "description", "")),
            incident_id=str(_lookup(data, "incident_id", "")),
        )

    def __str__(self) -> str:
        return (
            f"Server error, status code: {self.status_code}, error code: {self.code}, "
            f"incident id: {self.incident_id}, message: {self.description}"
        )


def _fetch(
    client: RestClient,
    url: str,
    error_type: type[CCError] | type[ContainerError],
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, str] | None = None,
) -> Any:
    status, body = client.get_json(url, headers=headers, params=params)
    if _is_success(status):
        return body
    error = error_type.from_json(body)
    if error == error_type():
        raise requests.HTTPError(f"Unexpected response from {url}, status code: {status}")
    raise error


class CCClient:
    """Queries the Cloud Foundry controller."""

    def __init__(self, endpoint: str, client: RestClient) -> None:
        self.endpoint = endpoint
        self.client = client

    def apps_and_services(self, space_id: str) -> AppsAndServices:
        body = _fetch(self.client, f"{self.endpoint}/v2/spaces/{space_id}/summary", CCError)
        return AppsAndServices.from_json(body or {})

    def org_usage(self, org_id: str) -> OrgUsage:
        body = _fetch(self.client, f"{self.endpoint}/v2/organizations/{org_id}/summary", CCError)
        return OrgUsage.from_json(body or {})


class ContainerClient:
    """Queries the container service."""

    def __init__(self, endpoint: str, client: RestClient) -> None:
        self.endpoint = endpoint
        self.client = client

    def containers(self, space_id: str) -> list[Container]:
        body = _fetch(
            self.client,
            f"{self.endpoint}/v3/containers/json",
            ContainerError,
            headers={"X-Auth-Project-Id": space_id},
            params={"all": "true"},
        )
        return [Container.from_json(item) for item in body or []]

    def containers_quota_and_usage(self, space_id: str) -> ContainersQuotaAndUsage:
        body = _fetch(
            self.client,
            f"{self.endpoint}/v3/containers/usage",
            ContainerError,
            headers={"X-Auth-Project-Id": space_id},
        )
        return ContainersQuotaAndUsage.from_json(body or {})