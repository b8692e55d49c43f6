"""Translation files bundled with the list command."""

from __future__ import annotations

import json
import os
import posixpath
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_EN_US_IDS = (
    "CloudFoundy Applications  {{.Used}}/{{.Limit}} used",
    "Containers  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}} Public IPs Requested|{{.BoundIPCount}} Used",
    "Created",
    "Image",
    "Instances",
    "Memory (MB)",
    "Name",
    "No API endpoint set. Use '{{.Command}}' to set an endpoint.",
    "No space targeted. Use '{{.Command}}' to target an org and a space.",
    "Not logged in. Use '{{.Command}}' to log in.",
    "Plan",
    "Routes",
    "Service Offering",
    "Services {{.Count}}/{{.Limit}} used",
    "State",
    "Status",
    "Unable to query apps and services of the target space:\n",
    "Unable to query containers of the target space:\n",
    "Unable to retrieve containers' usage and quota of the target space:\n",
    "Unable to retrieve usage of the target org:\n",
)

_ZH_HANS = (
    ("CloudFoundy Applications  {{.Used}}/{{.Limit}} used",
     "CloudFoundy 应用程序  {{.Used}}/{{.Limit}} 已使用"),
    ("Containers  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}} Public IPs Requested|{{.BoundIPCount}} Used",
     "容器  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}} 公共IP地址 已请求|{{.BoundIPCount}} 已使用"),
    ("Created", "创建"),
    ("Image", "镜像"),
    ("Instances", "实例"),
    ("Memory (MB)", "内存 （MB）"),
    ("Name", "名称"),
    ("No API endpoint set. Use '{{.Command}}' to set an endpoint.",
     "未设置任何 API 端点。请使用“{{.Command}}”来设置端点。"),
    ("No space targeted. Use '{{.Command}}' to target an org and a space.",
     "未选择目标空间。请使用“{{.Command}}”来选择目标空间。"),
    ("Not logged in. Use '{{.Command}}' to log in.", "未登录。请使用 '{{.Command}}' 登录。"),
    ("Plan", "套餐"),
    ("Routes", "路由"),
    ("Service Offering", "服务产品"),
    ("Services {{.Count}}/{{.Limit}} used", "服务 {{.Count}}/{{.Limit}} 已使用"),
    ("State", "状态"),
    ("Status", "状态"),
    ("Unable to query apps and services of the target space:\n", "无法获取目标空间中的应用程序和服务:\n"),
    ("Unable to query containers of the target space:\n", "无法获取目标空间中的容器\n"),
    ("Unable to retrieve containers' usage and quota of the target space:\n",
     "无法获取目标空间中容器的使用情况和配额\n"),
    ("Unable to retrieve usage of the target org:\n", "无法获取目标组织中的使用情况信息\n"),
)


def _encode(pairs: Any) -> bytes:
    entries = [{"id": key, "translation": value} for key, value in pairs]
    return json.dumps(entries, indent=2, ensure_ascii=False).encode("utf-8")


_ASSETS: dict[str, bytes] = {
    "i18n/resources/en_US.all.json": _encode((key, key) for key in _EN_US_IDS),
    "i18n/resources/zh_Hans.all.json": _encode(_ZH_HANS),
}


@dataclass(frozen=True)
class AssetInfo:
    """File information recorded for a bundled asset."""

    name: str
    size: int = 0
    mode: int = 0
    mod_time: datetime = field(default_factory=lambda: datetime.fromtimestamp(0, timezone.utc))

    @property
    def is_dir(self) -> bool:
        return False


def _build_tree(names: Any) -> dict:
    root: dict = {}
    for name in names:
        *dirs, leaf = name.split("/")
        node = root
        for part in dirs:
            node = node.setdefault(part, {})
        node[leaf] = name
    return root


_TREE = _build_tree(_ASSETS)


def _canonical(name: str) -> str:
    return name.replace("\\", "/")


def asset(name: str) -> bytes:
    """Return the bytes of a bundled asset."""
    try:
        return _ASSETS[_canonical(name)]
    except KeyError:
        raise FileNotFoundError(f"Asset {name} not found") from None


def asset_info(name: str) -> AssetInfo:
    """Return the file information of a bundled asset."""
    canonical = _canonical(name)
    if canonical not in _ASSETS:
        raise FileNotFoundError(f"AssetInfo {name} not found")
    return AssetInfo(name=canonical)


def asset_names() -> list[str]:
    """Return the names of all bundled assets."""
    return sorted(_ASSETS)


def asset_dir(name: str) -> list[str]:
    """List the entries directly below a bundled directory ("" is the root)."""
    node: Any = _TREE
    if name:
        for part in _canonical(name).split("/"):
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(f"Asset {name} not found")
            node = node[part]
    if not isinstance(node, dict):
        raise FileNotFoundError(f"Asset {name} not found")
    return sorted(node)


def _file_path(directory: str | os.PathLike, name: str) -> str:
    return os.path.join(directory, *_canonical(name).split("/"))


def restore_asset(directory: str | os.PathLike, name: str) -> None:
    """Write one asset below a directory, creating parent directories."""
    data = asset(name)
    info = asset_info(name)
    os.makedirs(_file_path(directory, posixpath.dirname(_canonical(name))), 0o755, exist_ok=True)
    path = _file_path(directory, name)
    with open(path, "wb") as handle:
        handle.write(data)
    if info.mode:
        os.chmod(path, info.mode)
    stamp = info.mod_time.timestamp()
    os.utime(path, (stamp, stamp))


def restore_assets(directory: str | os.PathLike, name: str) -> None:
    """Write an asset, or every asset below a bundled directory, recursively."""
    try:
        children = asset_dir(name)
    except FileNotFoundError:
        restore_asset(directory, name)
        return
    for child in children:
        restore_assets(directory, posixpath.join(name, child))