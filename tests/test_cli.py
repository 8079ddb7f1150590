from parlor.common.cli import parse_args, run_program
from parlor.common.io_interface import TestIOInterface


def test_parse_args_defaults():
    assert parse_args("test", []).verbose is False
    assert parse_args("test", ["-v"]).verbose is True


def test_run_program_runs_session():
    io = TestIOInterface()
    calls = []
    assert run_program("test", calls.append, [], io_interface=io) == 0
    assert calls == [io]


def test_run_program_handles_end_of_input():
    io = TestIOInterface()

    def session(io_interface):
        io_interface.input("never answered? ")

    assert run_program("test", session, [], io_interface=io) == 0
    assert io.sent_messages[-1] == "\nGoodbye!"


def test_run_program_handles_interrupt():
    io = TestIOInterface()

    def session(io_interface):
        raise KeyboardInterrupt

    assert run_program("test", session, [], io_interface=io) == 0
