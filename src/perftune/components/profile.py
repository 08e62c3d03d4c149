"""Label and selector lookups keyed off the profile identity."""

from __future__ import annotations

from perftune.components import (
    MACHINE_CONFIG_ROLE_LABEL_KEY,
    get_first_key_and_value,
    split_label_key,
)
from perftune.models import PerformanceProfile


def get_machine_config_label(profile: PerformanceProfile) -> dict[str, str]:
    """Labels put on the rendered machine config.

    Falls back to a role label derived from the node selector when the profile
    does not carry explicit labels.
    """
    if profile.machine_config_label is not None:
        return dict(profile.machine_config_label)
    return _default_label(profile)


def get_machine_config_pool_selector(profile: PerformanceProfile) -> dict[str, str]:
    if profile.machine_config_pool_selector is not None:
        return dict(profile.machine_config_pool_selector)
    return _default_label(profile)


def _default_label(profile: PerformanceProfile) -> dict[str, str]:
    node_selector_key, _ = get_first_key_and_value(profile.node_selector)
    if not node_selector_key:
        return {}
    _, node_role = split_label_key(node_selector_key)
    return {MACHINE_CONFIG_ROLE_LABEL_KEY: node_role}
