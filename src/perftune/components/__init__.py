"""Naming and label helpers shared by rendered components."""

from __future__ import annotations

from collections.abc import Mapping

COMPONENT_NAME_PREFIX = "performance"
MACHINE_CONFIG_ROLE_LABEL_KEY = "machineconfiguration.openshift.io/role"


def get_component_name(profile_name: str, prefix: str = COMPONENT_NAME_PREFIX) -> str:
    return f"{prefix}-{profile_name}"


def get_first_key_and_value(labels: Mapping[str, str]) -> tuple[str, str]:
    """Return the lexically first label so the choice does not depend on insertion order."""
    if not labels:
        return "", ""
    key = sorted(labels)[0]
    return key, labels[key]


def split_label_key(key: str) -> tuple[str, str]:
    """Split ``node-role.kubernetes.io/worker-rt`` into its domain and name."""
    if "/" not in key:
        return "", key
    domain, name = key.split("/", 1)
    return domain, name


__all__ = [
    "COMPONENT_NAME_PREFIX",
    "MACHINE_CONFIG_ROLE_LABEL_KEY",
    "get_component_name",
    "get_first_key_and_value",
    "split_label_key",
]
