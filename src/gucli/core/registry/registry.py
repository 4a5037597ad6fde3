"""Command registry: load, validate, save and reset the command document."""

import logging

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from gucli.core.errors import CommandValidationError, ConfigLoadError
from gucli.core.registry.schema import CommandEntry, describe_validation_error
from gucli.core.registry.store import CommandStore
from gucli.core.registry.types import CommandSet

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = """\
# params: shell=sh|bash|zsh|fish(default sh), command=string(with args),
#         icon=string(up to 8 characters), sn=bool(system notification, default true)
[[command]]
shell = "sh"
command = "hostname -A"
icon = ""
sn = true
"""

SCHEMA_COMMENT = (
    "params: shell=sh|bash|zsh|fish(default sh), command=string(with args), "
    "icon=string(up to 8 characters), sn=bool(system notification, default true)"
)


def parse_command_set(content: str) -> CommandSet:
    """Parse and validate a command document.

    Validation is atomic: the first offending entry aborts the whole parse.

    Raises:
        ConfigLoadError: If the text is not valid TOML or has the wrong shape
        CommandValidationError: If an entry is empty, duplicated, has an
            oversized icon, an unknown shell, or uses the legacy schema
    """
    try:
        data = tomlkit.parse(content).unwrap()
    except TOMLKitError as e:
        raise ConfigLoadError(f"Command document is not valid TOML: {e}") from e

    raw_entries = data.get("command", [])
    if not isinstance(raw_entries, list):
        raise ConfigLoadError("Command document must use [[command]] tables")

    entries: list[CommandEntry] = []
    for index, raw in enumerate(raw_entries):
        try:
            entries.append(CommandEntry.model_validate(raw))
        except ValidationError as e:
            raise CommandValidationError(index, describe_validation_error(e)) from e

    command_set = CommandSet(tuple(entry.to_spec(i) for i, entry in enumerate(entries)))
    validate_command_set(command_set)
    return command_set


def validate_command_set(command_set: CommandSet) -> None:
    """Check set-level invariants of an in-memory command set.

    Used by editors before save(), which itself does not validate.

    Raises:
        CommandValidationError: On the first invalid command
    """
    seen: set[str] = set()
    for index, cmd in enumerate(command_set):
        try:
            CommandEntry.model_validate(CommandEntry.from_spec(cmd))
        except ValidationError as e:
            raise CommandValidationError(index, describe_validation_error(e)) from e
        if cmd.invocation in seen:
            raise CommandValidationError(
                index, f"field `command` must be unique, {cmd.invocation!r} appears twice"
            )
        seen.add(cmd.invocation)


def render_command_set(command_set: CommandSet) -> str:
    """Render a command set as a canonical TOML document."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment(SCHEMA_COMMENT))
    tables = tomlkit.aot()
    for cmd in command_set:
        table = tomlkit.table()
        for key, value in CommandEntry.from_spec(cmd).items():
            table[key] = value
        tables.append(table)
    doc["command"] = tables
    return tomlkit.dumps(doc)


class CommandRegistry:
    """Owns the persisted command document.

    The registry keeps no parsed state of its own: callers hold the CommandSet
    returned by load() for the lifetime of their session and hand an edited
    set back to save().
    """

    def __init__(self, store: CommandStore) -> None:
        self._store = store

    @property
    def location(self) -> str:
        return self._store.location()

    def load(self) -> CommandSet:
        """Read and validate the command document.

        Raises:
            ConfigLoadError: If the document is missing, unreadable or malformed
            CommandValidationError: If any entry is invalid
        """
        if not self._store.exists():
            raise ConfigLoadError(
                f"Command document not found at {self._store.location()} - run 'gucli init' first"
            )
        try:
            content = self._store.read_text()
        except OSError as e:
            raise ConfigLoadError(
                f"Failed to read command document {self._store.location()}: {e}"
            ) from e
        command_set = parse_command_set(content)
        logger.debug("Loaded %d commands from %s", len(command_set), self._store.location())
        return command_set

    def save(self, command_set: CommandSet) -> None:
        """Replace the document with command_set.

        Performs no validation; run validate_command_set() first when the set
        came from user edits.

        Raises:
            ConfigLoadError: If the document cannot be written
        """
        try:
            self._store.write_text(render_command_set(command_set))
        except OSError as e:
            raise ConfigLoadError(
                f"Failed to write command document {self._store.location()}: {e}"
            ) from e
        logger.info("Saved %d commands to %s", len(command_set), self._store.location())

    def reset(self, *, force: bool) -> bool:
        """Write the built-in default document.

        Args:
            force: Overwrite an existing document. Without force, an existing
                document is left untouched.

        Returns:
            True if the default document was written, False if it already existed
        """
        if self._store.exists() and not force:
            return False
        try:
            self._store.write_text(DEFAULT_DOCUMENT)
        except OSError as e:
            raise ConfigLoadError(
                f"Failed to write command document {self._store.location()}: {e}"
            ) from e
        logger.info("Command document reset to default at %s", self._store.location())
        return True
