"""Render a PerformanceProfile JSON document into a MachineConfig manifest."""

import sys

from perftune import DEFAULT_ASSETS_DIR, StructuredLogger, new, read_profile, write_machine_config


def render(profile_path: str, output_path: str) -> None:
    logger = StructuredLogger()
    profile = read_profile(profile_path)
    machine_config = new(DEFAULT_ASSETS_DIR, profile, logger=logger)
    write_machine_config(machine_config, output_path)
    for record in logger.records:
        print(f"{record['operation']}: {record['message']}")


if __name__ == "__main__":
    render(sys.argv[1], sys.argv[2])
