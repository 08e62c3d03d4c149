"""PerformanceProfile parsing and MachineConfig manifest serialization."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from perftune.errors import ManifestError, ValidationError
from perftune.models import (
    CPU,
    HugePage,
    HugePages,
    IgnitionConfig,
    MachineConfig,
    PerformanceProfile,
    RealTimeKernel,
)

MACHINE_CONFIG_API_VERSION = "machineconfiguration.openshift.io/v1"
MACHINE_CONFIG_KIND = "MachineConfig"


def parse_profile(payload: Mapping[str, Any]) -> PerformanceProfile:
    """Build a profile from a CRD-shaped mapping.

    Only the document structure is checked; CPU lists and page sizes are kept
    verbatim.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Invalid profile payload type.")
    metadata = _optional_mapping(payload, "metadata", where="profile") or {}
    name = metadata.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationError(
            "Profile `metadata.name` must be a non-empty string.",
            hint="Set metadata.name on the PerformanceProfile.",
        )
    spec = _optional_mapping(payload, "spec", where="profile") or {}

    cpu_raw = _optional_mapping(spec, "cpu", where="spec") or {}
    cpu = CPU(
        isolated=_optional_str(cpu_raw, "isolated", where="spec.cpu"),
        non_isolated=_optional_str(cpu_raw, "nonIsolated", where="spec.cpu"),
    )

    hugepages: HugePages | None = None
    hugepages_raw = _optional_mapping(spec, "hugepages", where="spec")
    if hugepages_raw is not None:
        hugepages = HugePages(
            default_hugepages_size=_optional_str(
                hugepages_raw, "defaultHugepagesSize", where="spec.hugepages"
            ),
            pages=_parse_pages(hugepages_raw.get("pages", [])),
        )

    real_time_kernel: RealTimeKernel | None = None
    rt_raw = _optional_mapping(spec, "realTimeKernel", where="spec")
    if rt_raw is not None:
        enabled = rt_raw.get("enabled")
        if enabled is not None and not isinstance(enabled, bool):
            raise ValidationError("Invalid `spec.realTimeKernel.enabled` value.")
        real_time_kernel = RealTimeKernel(enabled=enabled)

    return PerformanceProfile(
        name=name,
        cpu=cpu,
        hugepages=hugepages,
        real_time_kernel=real_time_kernel,
        node_selector=_string_map(spec, "nodeSelector") or {},
        machine_config_label=_string_map(spec, "machineConfigLabel"),
        machine_config_pool_selector=_string_map(spec, "machineConfigPoolSelector"),
    )


def read_profile(path: str | Path) -> PerformanceProfile:
    profile_path = Path(path)
    try:
        raw = profile_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(
            "Unable to read performance profile.",
            context={"path": str(profile_path)},
        ) from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(
            "Invalid performance profile JSON.",
            hint=str(exc),
            context={"path": str(profile_path)},
        ) from exc
    return parse_profile(payload)


def ignition_to_dict(ignition: IgnitionConfig) -> dict[str, Any]:
    return {
        "ignition": {"version": ignition.version},
        "storage": {
            "files": [
                {
                    "filesystem": item.filesystem,
                    "path": item.path,
                    "contents": {"source": item.source},
                    "mode": item.mode,
                }
                for item in ignition.files
            ],
        },
        "systemd": {
            "units": [
                {"name": unit.name, "enabled": unit.enabled, "contents": unit.contents}
                for unit in ignition.units
            ],
        },
    }


def machine_config_to_dict(machine_config: MachineConfig) -> dict[str, Any]:
    return {
        "apiVersion": MACHINE_CONFIG_API_VERSION,
        "kind": MACHINE_CONFIG_KIND,
        "metadata": {
            "name": machine_config.name,
            "labels": dict(machine_config.labels),
        },
        "spec": {
            "config": ignition_to_dict(machine_config.config),
            "kernelArguments": list(machine_config.kernel_arguments),
            "kernelType": machine_config.kernel_type,
        },
    }


def serialize_machine_config(machine_config: MachineConfig) -> str:
    return json.dumps(machine_config_to_dict(machine_config), indent=2, sort_keys=True) + "\n"


def write_machine_config(machine_config: MachineConfig, path: str | Path) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(serialize_machine_config(machine_config), encoding="utf-8")
    return output_path


def _parse_pages(raw: Any) -> tuple[HugePage, ...]:
    if not isinstance(raw, list):
        raise ValidationError("Invalid `spec.hugepages.pages` value.")
    pages: list[HugePage] = []
    for index, item in enumerate(raw):
        where = f"spec.hugepages.pages[{index}]"
        if not isinstance(item, Mapping):
            raise ValidationError(f"Invalid `{where}` entry.")
        size = item.get("size")
        count = item.get("count")
        if not isinstance(size, str):
            raise ValidationError(f"Invalid `{where}.size` value.")
        # bool is an int subclass; a YAML/JSON `true` is not a page count.
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValidationError(f"Invalid `{where}.count` value.")
        pages.append(HugePage(size=size, count=count))
    return tuple(pages)


def _optional_mapping(payload: Mapping[str, Any], key: str, *, where: str) -> Mapping[str, Any] | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValidationError(f"Invalid `{where}.{key}` value.")
    return value


def _optional_str(payload: Mapping[str, Any], key: str, *, where: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Invalid `{where}.{key}` value.")
    return value


def _string_map(spec: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = spec.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValidationError(f"Invalid `spec.{key}` value.")
    return dict(value)
