import sys

from lvlkit.pipeline import picoshell


def _py(script):
    return [sys.executable, "-c", script]


def test_single_command_output(capfd):
    result = picoshell([_py("print('Hello World!')")])
    assert result == 0
    assert capfd.readouterr().out == "Hello World!\n"


def test_two_stage_pipeline_passes_data_through(capfd):
    producer = _py("print('one'); print('two.c'); print('three.c')")
    copier = _py("import sys; sys.stdout.write(sys.stdin.read())")
    assert picoshell([producer]) == 0
    direct = capfd.readouterr().out
    assert picoshell([producer, copier]) == 0
    assert capfd.readouterr().out == direct


def test_three_stage_pipeline_filters_and_counts(capfd):
    producer = _py("print('main.c'); print('notes.txt'); print('argo.c')")
    grep = _py(
        "import sys\n"
        "for line in sys.stdin:\n"
        "    if '.c' in line:\n"
        "        sys.stdout.write(line)\n"
    )
    count = _py("import sys; print(len(sys.stdin.readlines()))")
    assert picoshell([producer, grep, count]) == 0
    assert capfd.readouterr().out == "2\n"


def test_nonexistent_command_fails():
    assert picoshell([["lvlkit-no-such-command-anywhere"]]) == 1


def test_nonexistent_command_in_middle_gives_empty_input(capfd):
    producer = _py("print('data')")
    count = _py("import sys; print(len(sys.stdin.read()))")
    result = picoshell([producer, ["lvlkit-no-such-command-anywhere"], count])
    assert result == 1
    assert capfd.readouterr().out == "0\n"


def test_nonzero_exit_fails():
    assert picoshell([_py("import sys; sys.exit(4)")]) == 1


def test_failure_anywhere_in_pipeline_is_reported(capfd):
    failing = _py("import sys; sys.stdin.read(); sys.exit(2)")
    tail = _py("import sys; sys.stdin.read()")
    assert picoshell([_py("print('x')"), failing, tail]) == 1


def test_killed_by_signal_fails():
    script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    assert picoshell([_py(script)]) == 1


def test_empty_pipeline_succeeds():
    assert picoshell([]) == 0


def test_empty_argv_fails():
    assert picoshell([[]]) == 1