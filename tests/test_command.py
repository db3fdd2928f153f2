import pytest

from cmdshell import Command, ExecResult, MissingArgs, OtherError, Quit


def recording_command(nargs: int) -> Command:
    def handler(state: list, args: list[str]) -> None:
        state.append(list(args))

    return Command("rec", "records its arguments", nargs, handler)


def test_help_line_format(capsys):
    recording_command(0).help()
    assert capsys.readouterr().out == "rec :\trecords its arguments\n"


def test_run_with_too_few_args_skips_handler():
    state: list = []
    result = recording_command(2).run(state, ["one"])
    assert isinstance(result.error, MissingArgs)
    assert state == []


def test_run_passes_extra_args():
    state: list = []
    result = recording_command(1).run(state, ["a", "b", "c"])
    assert result == ExecResult.success()
    assert state == [["a", "b", "c"]]


def test_run_with_zero_nargs_and_no_args():
    state: list = []
    assert recording_command(0).run(state, []).ok
    assert state == [[]]


def test_handler_exec_error_becomes_result():
    def handler(state, args):
        raise OtherError("bad input")

    result = Command("fail", "", 0, handler).run(None, [])
    assert not result.ok
    assert result.message == "bad input"


def test_handler_can_request_quit():
    def handler(state, args):
        raise Quit()

    assert Command("bye", "", 0, handler).run(None, []).quit


def test_other_exceptions_propagate():
    def handler(state, args):
        raise RuntimeError("handler bug")

    with pytest.raises(RuntimeError):
        Command("boom", "", 0, handler).run(None, [])


def test_command_is_immutable():
    command = recording_command(0)
    with pytest.raises(AttributeError):
        command.nargs = 5
