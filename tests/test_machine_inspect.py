import io

from rich.console import Console

from simulator.samples import BUSY_BEAVER_2, KEEP_LAST, SCAN_TO_ONE
from simulator.turing_machine import HeadMove, Transition, TuringMachine
from tools.machine_inspect import latex_escape, list_machines, pretty_print_machine, transition_grid


def test_busy_beaver_grid():
    states, symbols, rows = transition_grid(BUSY_BEAVER_2)
    assert states == ["A", "B", "H"]
    assert symbols == ["0", "1"]
    assert rows == [
        ["A", "1RB", "1LB"],
        ["B", "1LA", "1RH"],
        ["H", "HALT", "HALT"],
    ]


def test_grid_includes_blank_column():
    _, symbols, rows = transition_grid(SCAN_TO_ONE)
    assert symbols == ["0", "1", "x"]
    assert rows[0] == ["a", "0Ra", "1Nb", "HALT"]


def test_grid_shows_first_match_only():
    machine = TuringMachine(
        transitions=(
            Transition("0", "a", "1", "b", HeadMove.RIGHT),
            Transition("0", "a", "0", "a", HeadMove.LEFT),
        ),
        start_state="a",
        blank_symbol="_",
    )
    _, symbols, rows = transition_grid(machine)
    assert symbols == ["_", "0"]
    assert rows[0] == ["a", "HALT", "1Rb"]


def test_pretty_print_machine_latex():
    buffer = io.StringIO()
    latex = pretty_print_machine(BUSY_BEAVER_2, Console(file=buffer, width=120))
    assert latex[0] == r"\begin{array}{c|cc}"
    assert latex[2] == r"\text{A} & \text{1RB} & \text{1LB} \\"
    assert latex[-1] == r"\end{array}"
    # rich may wrap the table title to the table width
    output = " ".join(buffer.getvalue().split())
    assert "Transition Table: busy_beaver_2" in output
    assert BUSY_BEAVER_2.fingerprint() in output


def test_latex_escape():
    assert latex_escape("q_1") == r"q\_1"
    assert latex_escape("#$%&{}") == r"\#\$\%\&\{\}"
    assert latex_escape("a\\b~^") == r"a\textbackslash{}b\textasciitilde{}\textasciicircum{}"
    assert latex_escape(7) == "7"


def test_keep_last_latex_is_escaped():
    latex = pretty_print_machine(KEEP_LAST, Console(file=io.StringIO(), width=120))
    assert latex[1] == r"State/Symbol & \text{0} & \text{1} & \text{\#} \\ \hline"
    # state d: 0Rd, 1Rd, then #Le on the blank
    assert latex[5] == r"\text{d} & \text{0Rd} & \text{1Rd} & \text{\#Le} \\"
    body = "\n".join(latex)
    assert "{#" not in body
    assert " #" not in body


def test_list_machines():
    buffer = io.StringIO()
    list_machines(Console(file=buffer, width=120))
    output = buffer.getvalue()
    for name in ("scan_to_one", "keep_last", "busy_beaver_2"):
        assert name in output
