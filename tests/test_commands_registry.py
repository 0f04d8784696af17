import pytest

from marvin_engine.actions import CommandContext, CommandResult
from marvin_engine.commands import (
    DEFAULT_COMMANDS,
    CommandId,
    CommandRef,
    CommandRegistry,
    load_default_commands,
)


def make_command(command_id: CommandId = CommandId.JOIN_LINE) -> CommandRef:
    def handler(context: CommandContext) -> CommandResult:
        return CommandResult(status="ok", message="custom")

    return CommandRef(id=command_id, handler=handler)


def test_defaults_cover_every_command_id() -> None:
    registry = CommandRegistry()

    load_default_commands(registry)

    stats = registry.stats()
    assert stats.command_count == len(CommandId) == len(DEFAULT_COMMANDS)
    assert stats.commands == tuple(sorted(command.value for command in CommandId))


def test_register_duplicate_requires_replace() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    with pytest.raises(ValueError):
        registry.register(make_command())

    registry.register(make_command(), replace=True)
    assert len(registry) == 1


def test_get_unknown_command_raises_key_error() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.get(CommandId.DELETE_LINE)
    with pytest.raises(KeyError):
        registry.get("notACommand")


def test_include_and_exclude_filters() -> None:
    included = CommandRegistry()
    load_default_commands(included, include=["duplicateLine", "joinLine"])
    excluded = CommandRegistry()
    load_default_commands(excluded, exclude=["deleteLine"])

    assert included.stats().commands == ("duplicateLine", "joinLine")
    assert "deleteLine" not in excluded
    assert len(excluded) == len(CommandId) - 1


def test_extra_commands_override_defaults() -> None:
    registry = CommandRegistry()
    custom = make_command(CommandId.JOIN_LINE)

    load_default_commands(registry, extra_commands=[custom])

    assert registry.get("joinLine") is custom


def test_unregister_returns_removed_reference() -> None:
    registry = CommandRegistry()
    load_default_commands(registry)

    removed = registry.unregister("selectLineContents")

    assert removed is not None
    assert removed.id is CommandId.SELECT_LINE_CONTENTS
    assert registry.unregister("selectLineContents") is None
    assert registry.unregister("bogus") is None


def test_command_ref_validation() -> None:
    with pytest.raises(TypeError):
        CommandRef(id=CommandId.JOIN_LINE, handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        CommandRef(id="", handler=lambda context: CommandResult())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        CommandRef(id="frobnicate", handler=lambda context: CommandResult())  # type: ignore[arg-type]


def test_command_ref_defaults() -> None:
    ref = CommandRef(id="duplicateLine", handler=lambda context: CommandResult())  # type: ignore[arg-type]

    assert ref.id is CommandId.DUPLICATE_LINE
    assert ref.telemetry_name == "duplicateLine"
    with pytest.raises(TypeError):
        ref.metadata["key"] = "value"  # type: ignore[index]


def test_parse_uses_last_identifier_component() -> None:
    assert CommandId.parse("duplicateLine") is CommandId.DUPLICATE_LINE
    assert (
        CommandId.parse("com.example.Marvin.SourceEditorCommand.selectWordBelow")
        is CommandId.SELECT_WORD_BELOW
    )
    assert CommandId.parse("com.example.Marvin.unknown") is None
    assert CommandId.parse("") is None


def test_iter_commands_follows_registration_order() -> None:
    registry = CommandRegistry()
    load_default_commands(registry, include=["joinLine", "deleteLine"])

    assert [ref.id for ref in registry.iter_commands()] == [
        CommandId.JOIN_LINE,
        CommandId.DELETE_LINE,
    ]
