"""[Service] section record."""

from typing import Any

from pydantic import Field, field_validator

from ._Section import _Section
from .FieldSpec import FieldSpec
from .Restart import Restart
from .ServiceType import ServiceType
from .SystemdBool import SystemdBool


class ServiceSection(_Section):
    """Process execution, restart and exit handling settings."""

    HEADER = "Service"
    FIELDS = (
        FieldSpec("Type", "type"),
        FieldSpec("ExecStartPre", "exec_start_pre"),
        FieldSpec("ExecStart", "exec_start"),
        FieldSpec("ExecReload", "exec_reload"),
        FieldSpec("ExecStop", "exec_stop"),
        FieldSpec("RestartSec", "restart_sec"),
        FieldSpec("User", "user"),
        FieldSpec("Group", "group"),
        FieldSpec("Restart", "restart"),
        FieldSpec("TimeoutStartSec", "timeout_start_sec"),
        FieldSpec("TimeoutStopSec", "timeout_stop_sec"),
        FieldSpec("SuccessExitStatus", "success_exit_status"),
        FieldSpec("RestartPreventExitStatus", "restart_prevent_exit_status"),
        FieldSpec("PIDFile", "pid_file"),
        FieldSpec("WorkingDirectory", "working_directory"),
        FieldSpec("RootDirectory", "root_directory"),
        FieldSpec("LogsDirectory", "logs_directory"),
        FieldSpec("KillMode", "kill_mode"),
        FieldSpec("ConditionPathExists", "condition_path_exists"),
        FieldSpec("RemainAfterExit", "remain_after_exit"),
    )

    type: ServiceType | None = Field(None, description="Process start-up type")
    exec_start_pre: str | None = Field(None, description="Command run before ExecStart")
    exec_start: str | None = Field(None, description="Command that starts the service")
    exec_reload: str | None = Field(None, description="Command that reloads the service configuration")
    exec_stop: str | None = Field(None, description="Command that stops the service")
    restart_sec: str | None = Field(None, description="Time to sleep before restarting")
    user: str | None = Field(None, description="User the processes run as")
    group: str | None = Field(None, description="Group the processes run as")
    restart: Restart | None = Field(None, description="Restart policy")
    # None is unset and omitted; 0 is a real value and renders as TimeoutStartSec=0
    timeout_start_sec: int | None = Field(None, description="Start-up timeout in seconds, 0 disables it")
    timeout_stop_sec: int | None = Field(None, description="Stop timeout in seconds, 0 disables it")
    success_exit_status: str | None = Field(None, description="Extra exit statuses treated as success")
    restart_prevent_exit_status: str | None = Field(None, description="Exit statuses that prevent a restart")
    pid_file: str | None = Field(None, description="PID file of a forking service")
    working_directory: str | None = Field(None, description="Working directory of executed processes")
    root_directory: str | None = Field(None, description="Root directory of executed processes")
    logs_directory: str | None = Field(None, description="Log directories created below /var/log")
    kill_mode: str | None = Field(None, description="How processes of this unit are killed")
    condition_path_exists: str | None = Field(None, description="Only start if this path exists")
    remain_after_exit: SystemdBool | None = Field(None, description="Stay active after all processes exit")

    @field_validator("remain_after_exit", mode="before")
    @classmethod
    def bool_to_systemd_bool(cls, v: Any) -> Any:
        # YAML reads a bare yes/no as a bool
        if isinstance(v, bool):
            return SystemdBool.from_bool(v)
        return v

    @field_validator("restart", mode="before")
    @classmethod
    def false_to_restart_no(cls, v: Any) -> Any:
        if v is False:
            return Restart.NO
        return v
