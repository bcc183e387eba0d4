from __future__ import annotations

import asyncio

import pytest

import commands
from commands import CommandError
from persistence import Record


def test_greet():
    assert commands.greet("World") == "Hello, World! You've been greeted!"
    assert commands.greet("") == "Hello, ! You've been greeted!"


def test_save_and_load_json_file(record_path):
    commands.save_json_file(str(record_path), Record(name="widget", value=42))
    assert commands.load_json_file(str(record_path)) == Record(name="widget", value=42)

    # plain mappings are accepted as the record payload
    commands.save_json_file(str(record_path), {"name": "gadget", "value": -1})
    assert commands.load_json_file(str(record_path)) == Record(name="gadget", value=-1)


def test_errors_flatten_to_command_error(tmp_path, record_path):
    with pytest.raises(CommandError) as missing:
        commands.load_json_file(str(tmp_path / "nope.json"))
    assert str(missing.value)

    record_path.write_text("not json", encoding="utf-8")
    with pytest.raises(CommandError) as malformed:
        commands.load_json_file(str(record_path))
    assert str(malformed.value)

    with pytest.raises(CommandError):
        commands.save_json_file(str(tmp_path / "no" / "dir.json"), Record(name="x", value=1))


def test_save_rejects_bad_payload(record_path):
    with pytest.raises(CommandError):
        commands.save_json_file(str(record_path), {"name": "x"})
    with pytest.raises(CommandError):
        commands.save_json_file(str(record_path), {"name": "x", "value": "1"})
    with pytest.raises(CommandError):
        commands.save_json_file(str(record_path), ["x", 1])  # type: ignore[arg-type]
    assert not record_path.exists()


def test_async_commands(record_path):
    async def _run():
        await commands.save_json_file_async(str(record_path), {"name": "a", "value": 1})
        assert await commands.load_json_file_async(str(record_path)) == Record(name="a", value=1)

        record_path.write_text("{}", encoding="utf-8")
        with pytest.raises(CommandError):
            await commands.load_json_file_async(str(record_path))

    asyncio.run(_run())


def test_command_registry():
    assert set(commands.COMMANDS) == {"greet", "save_json_file", "load_json_file"}


@pytest.mark.parametrize("bad_path", [3, None, ["a"], 1.5])
def test_non_string_path_is_command_error(bad_path, record_path):
    with pytest.raises(CommandError):
        commands.save_json_file(bad_path, {"name": "x", "value": 1})  # type: ignore[arg-type]
    with pytest.raises(CommandError):
        commands.load_json_file(bad_path)  # type: ignore[arg-type]

    async def _run():
        with pytest.raises(CommandError):
            await commands.save_json_file_async(bad_path, {"name": "x", "value": 1})  # type: ignore[arg-type]
        with pytest.raises(CommandError):
            await commands.load_json_file_async(bad_path)  # type: ignore[arg-type]

    asyncio.run(_run())


def test_unencodable_save_keeps_previous_record(record_path):
    commands.save_json_file(str(record_path), {"name": "keep", "value": 1})

    with pytest.raises(CommandError):
        commands.save_json_file(str(record_path), {"name": "\ud800", "value": 1})

    assert commands.load_json_file(str(record_path)) == Record(name="keep", value=1)
