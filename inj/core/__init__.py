"""Lowest-level launcher utilities.

Dependency direction rules:
- inj.core must not import inj.launcher or inj.cli
"""

from inj.core.args import resolve_arg, resolve_args
from inj.core.environment import (
	LaunchEnvironment,
	LauncherEnvironmentError,
	current_environment,
	resolve_install_root,
	resolve_invocation_dir,
)
from inj.core.launch_record import LaunchRecord, format_command_string, launch_record_to_dict
from inj.core.time import utc_timestamp_iso_z

__all__ = [
	"LaunchEnvironment",
	"LaunchRecord",
	"LauncherEnvironmentError",
	"current_environment",
	"format_command_string",
	"launch_record_to_dict",
	"resolve_arg",
	"resolve_args",
	"resolve_install_root",
	"resolve_invocation_dir",
	"utc_timestamp_iso_z",
]
