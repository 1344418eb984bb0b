import argparse

from rich.console import Console
from rich.table import Table

from simulator.samples import SAMPLE_MACHINES, get_sample

console = Console()

LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
}


def latex_escape(text):
    return "".join(LATEX_SPECIALS.get(char, char) for char in str(text))


def latex_cell(text):
    # array cells are in math mode; \text keeps symbols like # and _ literal
    return f"\\text{{{latex_escape(text)}}}"


def _ordered(declared, used):
    """Declared labels first, then any label the table uses without declaring it."""
    return list(dict.fromkeys(list(declared) + list(used)))


def transition_grid(machine):
    """
    Map (state, symbol) -> action in compact busy beaver notation, e.g. "1RB".

    Only the first transition for a key is shown, since that is the one that
    fires. Missing keys are halts.
    """
    states = _ordered(machine.states, [t.curr_state for t in machine.transitions])
    symbols = _ordered(
        list(machine.work_alphabet) + [machine.blank_symbol],
        [t.curr_symbol for t in machine.transitions],
    )

    grid = {}
    for transition in machine.transitions:
        key = (transition.curr_state, transition.curr_symbol)
        if key not in grid:
            grid[key] = f"{transition.next_symbol}{transition.head_move.code}{transition.next_state}"

    rows = []
    for state in states:
        rows.append([str(state)] + [grid.get((state, symbol), "HALT") for symbol in symbols])
    return states, symbols, rows


def pretty_print_machine(machine, out=None):
    """Pretty print the transition table as a state x symbol grid plus a LaTeX array."""
    out = out or console
    states, symbols, rows = transition_grid(machine)

    # === Terminal Human-Readable Table ===
    table = Table(title=f"Transition Table: {machine.name}")
    table.add_column("State")
    for symbol in symbols:
        table.add_column(str(symbol), justify="center")
    for row in rows:
        table.add_row(*row)
    out.print(table)

    out.print(f"Start state: {machine.start_state}   Blank: {machine.blank_symbol}", markup=False)
    out.print(f"Fingerprint: {machine.fingerprint()}", markup=False)

    # === LaTeX Table Output ===
    latex_lines = [
        r"\begin{array}{c|" + "c" * len(symbols) + "}",
        "State/Symbol & " + " & ".join(latex_cell(s) for s in symbols) + r" \\ \hline",
    ]
    for row in rows:
        latex_lines.append(" & ".join(latex_cell(cell) for cell in row) + r" \\")
    latex_lines.append(r"\end{array}")

    out.print("\n=== LaTeX Table ===", markup=False)
    for line in latex_lines:
        out.print(line, markup=False, highlight=False)
    return latex_lines


def list_machines(out=None):
    out = out or console
    table = Table(title="Built-in Machines")
    table.add_column("Name")
    table.add_column("States", justify="right")
    table.add_column("Transitions", justify="right")
    table.add_column("Blank", justify="center")
    for name, machine in sorted(SAMPLE_MACHINES.items()):
        table.add_row(name, str(len(machine.states)), str(len(machine.transitions)), str(machine.blank_symbol))
    out.print(table)


def main():
    parser = argparse.ArgumentParser(description="Transition Table Inspector")
    parser.add_argument("--machine", help="Built-in machine to inspect, e.g. busy_beaver_2")
    parser.add_argument("--list", action="store_true", help="List built-in machines")
    args = parser.parse_args()

    if args.list or not args.machine:
        list_machines()
        return

    pretty_print_machine(get_sample(args.machine))

if __name__ == "__main__":
    main()
