from simulator.turing_machine import HeadMove, Transition, TuringMachine

L = HeadMove.LEFT
R = HeadMove.RIGHT
N = HeadMove.STAY

# === Scan right over 0s, stop on the first 1 ===
SCAN_TO_ONE = TuringMachine(
    name="scan_to_one",
    input_alphabet=("0", "1"),
    states=("a", "b"),
    work_alphabet=("0", "1"),
    transitions=(
        Transition("0", "a", "0", "a", R),
        Transition("1", "a", "1", "b", N),
    ),
    start_state="a",
    blank_symbol="x",
)

# === Erase everything except the last input symbol (writes "1" on empty input) ===
KEEP_LAST = TuringMachine(
    name="keep_last",
    input_alphabet=("0", "1"),
    states=("a", "b", "c", "d", "e", "f", "g", "h"),
    work_alphabet=("0", "1", "#"),
    transitions=(
        Transition("0", "a", "0", "c", L),
        Transition("1", "a", "1", "c", L),
        Transition("#", "a", "1", "d", R),
        Transition("#", "c", "1", "d", R),
        Transition("0", "d", "0", "d", R),
        Transition("1", "d", "1", "d", R),
        Transition("#", "d", "#", "e", L),
        Transition("0", "e", "0", "f", L),
        Transition("1", "e", "1", "f", L),
        Transition("#", "e", "#", "b", N),
        Transition("0", "f", "#", "f", L),
        Transition("1", "f", "#", "f", L),
        Transition("#", "f", "#", "b", N),
        Transition("#", "b", "#", "g", R),
        Transition("#", "g", "#", "g", R),
        Transition("1", "g", "1", "h", N),
    ),
    start_state="a",
    blank_symbol="#",
)

# === 2-state busy beaver: 6 steps, four 1s, halts in H ===
BUSY_BEAVER_2 = TuringMachine(
    name="busy_beaver_2",
    input_alphabet=("0", "1"),
    states=("A", "B", "H"),
    work_alphabet=("0", "1"),
    transitions=(
        Transition("0", "A", "1", "B", R),
        Transition("1", "A", "1", "B", L),
        Transition("0", "B", "1", "A", L),
        Transition("1", "B", "1", "H", R),
    ),
    start_state="A",
    blank_symbol="0",
)

SAMPLE_MACHINES = {
    machine.name: machine
    for machine in (SCAN_TO_ONE, KEEP_LAST, BUSY_BEAVER_2)
}

# default initial tape per sample, used when no tape is given
SAMPLE_TAPES = {
    "scan_to_one": "00010",
    "keep_last": "",
    "busy_beaver_2": "",
}


def get_sample(name):
    if name not in SAMPLE_MACHINES:
        available = ", ".join(sorted(SAMPLE_MACHINES))
        raise ValueError(f"Unknown machine '{name}'. Available machines: {available}")
    return SAMPLE_MACHINES[name]
