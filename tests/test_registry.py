import logging

from cmdshell import Command, CommandRegistry


def noop(state, args) -> None:
    return None


def test_iterates_in_name_order():
    registry = CommandRegistry()
    for name in ("zeta", "alpha", "mid"):
        registry.register(Command(name, name, 0, noop))
    assert [cmd.name for cmd in registry] == ["alpha", "mid", "zeta"]
    assert registry.names() == ["alpha", "mid", "zeta"]
    assert len(registry) == 3


def test_last_registration_wins():
    registry = CommandRegistry()
    registry.register(Command("echo", "first", 0, noop))
    second = registry.register(Command("echo", "second", 1, noop))
    assert len(registry) == 1
    assert registry.get("echo") is second
    assert "echo" in registry
    assert registry.get("missing") is None


def test_unselectable_names_are_accepted_with_warning(caplog):
    registry = CommandRegistry()
    with caplog.at_level(logging.WARNING, logger="cmdshell.registry"):
        registry.register(Command("", "empty", 0, noop))
        registry.register(Command("two words", "spaced", 0, noop))
    assert "" in registry
    assert "two words" in registry
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_builtin_shadowing_is_flagged(caplog):
    registry = CommandRegistry()
    with caplog.at_level(logging.WARNING, logger="cmdshell.registry"):
        registry.register(Command("quit", "never reached", 0, noop))
    assert "quit" in registry
    assert "shadowed" in caplog.text
