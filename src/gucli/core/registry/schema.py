"""Pydantic model for one `[[command]]` table of the command document.

Canonical schema:

    [[command]]
    shell = "sh"        # optional: sh, bash, zsh or fish
    command = "hostname -A"
    icon = ""           # optional, at most 8 characters
    sn = true           # optional, notify on success

The historical `name`/`active`/`system_notification` schema is rejected rather
than migrated.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from gucli.core.registry.types import MAX_ICON_LENGTH, CommandSpec, Shell

LEGACY_FIELDS = frozenset({"name", "active", "system_notification"})


class CommandEntry(BaseModel):
    """Single entry of the persisted command document."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    shell: str = "sh"
    command: str
    icon: str = ""
    sn: bool = True

    @model_validator(mode="before")
    @classmethod
    def reject_legacy_schema(cls, data: Any) -> Any:
        if isinstance(data, dict) and "command" not in data and LEGACY_FIELDS & data.keys():
            msg = (
                "legacy 'name'/'active' schema is not supported; "
                "use 'command', 'icon', 'sn' and optional 'shell'"
            )
            raise ValueError(msg)
        return data

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        if not v.strip():
            msg = "field `command` cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("icon")
    @classmethod
    def validate_icon(cls, v: str) -> str:
        # len() counts code points, i.e. Unicode scalar values
        if len(v) > MAX_ICON_LENGTH:
            msg = f"icon must be at most {MAX_ICON_LENGTH} characters, got {len(v)}"
            raise ValueError(msg)
        return v

    @field_validator("shell")
    @classmethod
    def validate_shell(cls, v: str) -> str:
        if v not in {s.value for s in Shell}:
            allowed = ", ".join(s.value for s in Shell)
            msg = f"unknown shell {v!r}, expected one of: {allowed}"
            raise ValueError(msg)
        return v

    def to_spec(self, id: int) -> CommandSpec:
        return CommandSpec(
            id=id,
            shell=Shell(self.shell),
            invocation=self.command,
            icon=self.icon,
            notify_on_success=self.sn,
        )

    @staticmethod
    def from_spec(spec: CommandSpec) -> dict[str, Any]:
        """Document table for a command, in canonical field order."""
        return {
            "shell": spec.shell.value,
            "command": spec.invocation,
            "icon": spec.icon,
            "sn": spec.notify_on_success,
        }


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten the first pydantic error into a one-line reason.

    Errors raised by our own validators are reported with their original
    message instead of pydantic's "Value error, ..." wrapper.
    """
    first = exc.errors()[0]
    ctx = first.get("ctx") or {}
    original = ctx.get("error")
    message = str(original) if original is not None else first["msg"]
    field = ".".join(str(part) for part in first.get("loc", ()))
    if field:
        return f"{field}: {message}"
    return message


__all__ = ["CommandEntry", "describe_validation_error"]
