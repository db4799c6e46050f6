"""
One Program, Two Interpreters
=============================

This example builds a login program once and hands the very same value to
the synchronous and the asyncio runtime. Input comes from a scripted console,
so the example runs unattended; swap in ``StdConsole()`` to type the answers.

Building the program performs no I/O: nothing is printed until a runtime
walks it.
"""

import asyncio

from doio import AsyncioRuntime, SyncRuntime, bind, do, print_, pure, read
from doio.testing import ScriptedConsole

# =============================================================================
# Example 1: Explicit bind chains
# =============================================================================


def login():
    return bind(print_("user:"), lambda _:
        bind(read(), lambda user:
            bind(print_("password:"), lambda _:
                bind(read(), lambda password:
                    pure(user == "me" and password == "hola123")))))


def example_sync():
    console = ScriptedConsole(["me", "hola123"])
    result = SyncRuntime(console).run(login())

    print("=== Example 1: SyncRuntime ===")
    print(f"Console trace: {console.trace}")
    print(f"Authorized: {result}")
    print()


# =============================================================================
# Example 2: The same program on the asyncio runtime
# =============================================================================


async def example_async():
    console = ScriptedConsole(["me", "wrong"])
    task = AsyncioRuntime(console).run_async(login())
    result = await task

    print("=== Example 2: AsyncioRuntime ===")
    print(f"Console trace: {console.trace}")
    print(f"Authorized: {result}")
    print()


# =============================================================================
# Example 3: do-notation
# =============================================================================


@do
def survey(questions):
    answers = {}
    for question in questions:
        yield print_(question)
        answers[question] = yield read()
    return answers


def example_do():
    console = ScriptedConsole(["Ada", "green"])
    result = SyncRuntime(console).run(survey(["name?", "favourite colour?"]))

    print("=== Example 3: @do ===")
    print(f"Answers: {result}")
    print()


if __name__ == "__main__":
    example_sync()
    asyncio.run(example_async())
    example_do()
