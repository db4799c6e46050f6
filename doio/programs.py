"""The workshop programs, written against the console algebra.

Each function only builds a Program; pass the result to an interpreter to
actually talk to the console.
"""

from __future__ import annotations

from doio.combinators import bind, print_, pure, read, then
from doio.do import do
from doio.program import Program


def greetings() -> Program[None]:
    return print_("Hello, world!")


def feedback() -> Program[str]:
    """Ask how things are going and return the answer."""
    return then(print_("How are you?"), read())


def echo() -> Program[None]:
    return bind(read(), lambda message: print_(message))


def check_credentials(user: str, password: str) -> bool:
    return user == "me" and password == "hola123"


def authorized() -> Program[bool]:
    return bind(print_("user:"), lambda _:
        bind(read(), lambda user:
            bind(print_("password:"), lambda _:
                bind(read(), lambda password:
                    pure(check_credentials(user, password))))))


@do
def authorized_do():
    """Same as :func:`authorized`, written with do-notation."""
    yield print_("user:")
    user = yield read()
    yield print_("password:")
    password = yield read()
    return check_credentials(user, password)


__all__ = [
    "authorized",
    "authorized_do",
    "check_credentials",
    "echo",
    "feedback",
    "greetings",
]
