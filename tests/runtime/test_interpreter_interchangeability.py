"""The same Program value gives the same observable behaviour under every runtime."""

from __future__ import annotations

import pytest

from doio import AsyncioRuntime, SyncRuntime, bind, map_, print_, pure, read, sequence, then
from doio.programs import authorized, authorized_do, echo, feedback, greetings
from doio.testing import ScriptedConsole


def shopping_list():
    def collect(items: list[str]):
        return bind(read(), lambda item: pure(items) if item == "done" else collect([*items, item]))

    return then(
        print_("items? (done to finish)"),
        bind(collect([]), lambda items: then(print_(", ".join(items)), pure(len(items)))),
    )


CASES = [
    ("greetings", greetings, []),
    ("feedback", feedback, ["great"]),
    ("echo", echo, ["hi"]),
    ("authorized-ok", authorized, ["me", "hola123"]),
    ("authorized-bad", authorized, ["me", "wrong"]),
    ("authorized-do", authorized_do, ["me", "hola123"]),
    ("sequence", lambda: sequence([read(), map_(read(), str.upper)]), ["a", "b"]),
    ("shopping", shopping_list, ["milk", "eggs", "done"]),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("name, build, inputs", CASES, ids=[case[0] for case in CASES])
async def test_sync_and_async_agree(name, build, inputs) -> None:
    program = build()
    sync_console = ScriptedConsole(inputs)
    async_console = ScriptedConsole(inputs)

    sync_result = SyncRuntime(sync_console).run(program)
    async_result = await AsyncioRuntime(async_console).run_async(program)

    assert sync_result == async_result
    assert sync_console.trace == async_console.trace


@pytest.mark.asyncio
async def test_failures_agree() -> None:
    program = bind(read(), lambda a: then(print_(a), read()))
    sync_console = ScriptedConsole(["only"])
    async_console = ScriptedConsole(["only"])

    sync_result = SyncRuntime(sync_console).run_safe(program)
    async_result = await AsyncioRuntime(async_console).run_safe(program)

    assert sync_result.is_err and async_result.is_err
    assert type(sync_result.unwrap_err()) is type(async_result.unwrap_err())
    assert sync_console.trace == async_console.trace == [("read", "only"), ("write", "only")]
