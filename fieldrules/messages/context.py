"""Active message resolver

Rules take an explicit `messages=` resolver. Rules built without one look
up the resolver bound to the current context when they fail, so an
application can build its rules once and choose the locale per request:

    with use_messages(MessageCatalog.load("de")):
        form_rule(value)

The binding is a ContextVar: it is scoped to the current thread or task
and undone when the block exits.
"""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from fieldrules.errors import MessageResolutionError, message_unavailable


@runtime_checkable
class MessageResolver(Protocol):
    """Anything that turns a message key and params into display text."""

    def resolve(self, key: str, params: Sequence[Any] = ()) -> str: ...


_active_resolver: ContextVar[MessageResolver | None] = ContextVar("fieldrules_messages", default=None)


def activate(resolver: MessageResolver) -> Token:
    """Bind resolver for the current context. Pair with deactivate()."""
    return _active_resolver.set(resolver)


def deactivate(token: Token) -> None:
    _active_resolver.reset(token)


@contextmanager
def use_messages(resolver: MessageResolver) -> Iterator[MessageResolver]:
    """Bind resolver for the duration of the block."""
    token = activate(resolver)
    try:
        yield resolver
    finally:
        deactivate(token)


def current_resolver() -> MessageResolver:
    """The bound resolver; raises MessageResolutionError if none is bound."""
    if (resolver := _active_resolver.get()) is None:
        raise MessageResolutionError(message_unavailable(
            "", "No message resolver is active. Pass messages= to the rule, "
            "set error_text, or bind a catalog with use_messages()."))
    return resolver
