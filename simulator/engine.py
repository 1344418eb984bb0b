from dataclasses import dataclass
from typing import Hashable, Optional

from rich.console import Console

from simulator.tape import ExpandingTape
from simulator.turing_machine import Transition, TuringMachine

HALT_NO_TRANSITION = "no_transition"
HALT_FIXED_POINT = "fixed_point"
HALT_MAX_STEPS = "max_steps"

_START_STATE = object()


def make_console(**kwargs):
    """Console that emits tape frames verbatim (no markup, emoji, highlighting or wrapping)."""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("markup", False)
    kwargs.setdefault("emoji", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(**kwargs)


@dataclass
class RunSummary:
    machine: str
    steps: int
    final_state: Hashable
    head_position: int
    first_index: int
    tape: str
    halt_reason: str

    def to_entry(self):
        return {
            "machine": self.machine,
            "steps": self.steps,
            "final_state": str(self.final_state),
            "head_position": self.head_position,
            "first_index": self.first_index,
            "tape": self.tape,
            "halt_reason": self.halt_reason,
        }


class TuringRun:
    """
    Mutable state of one simulation.

    The machine definition is shared and never touched; the tape, head
    position and current state belong to this run alone.
    """

    def __init__(self, machine: TuringMachine, tape=(), head_position=0, current_state=_START_STATE, console=None):
        self.machine = machine
        self.tape = ExpandingTape(tape, default=machine.blank_symbol)
        self.head_position = head_position
        self.current_state = machine.start_state if current_state is _START_STATE else current_state
        self.console = console or make_console()
        self.steps = 0
        self.last_transition: Optional[Transition] = None

    def current_symbol(self):
        return self.tape.get(self.head_position)

    def find_transition(self, symbol, state) -> Optional[Transition]:
        # linear scan, first declared match wins
        for transition in self.machine.transitions:
            if transition.matches(symbol, state):
                return transition
        return None

    def apply_transition(self, transition: Transition):
        self.tape.write(self.head_position, transition.next_symbol)
        self.head_position += transition.head_move.offset
        self.tape.ensure_available(self.head_position)
        self.current_state = transition.next_state

    def exec_step(self) -> bool:
        """Apply one transition. Returns True if the state or head position changed."""
        last_head_position = self.head_position
        last_state = self.current_state
        symbol = self.current_symbol()

        transition = self.find_transition(symbol, last_state)
        self.last_transition = transition
        if transition is None:
            self.console.print("No matching transition found")
            return False

        self.console.print(f"rule matched: {transition}")
        self.apply_transition(transition)
        self.steps += 1
        return last_state != self.current_state or last_head_position != self.head_position

    def pretty_print(self):
        self.console.print(f"Current State: {self.current_state}")
        self.console.print(self.tape.render())
        self.console.print(" " * (self.head_position - self.tape.first_index()) + "^")

    def run(self, max_steps=None) -> RunSummary:
        """
        Step until the configuration stops changing.

        With max_steps=None the loop is unbounded, so a machine that never
        halts never returns.
        """
        self.pretty_print()
        halt_reason = HALT_MAX_STEPS
        while max_steps is None or self.steps < max_steps:
            did_change = self.exec_step()
            self.pretty_print()
            if not did_change:
                self.console.print("No change occurred stop processing!")
                halt_reason = HALT_NO_TRANSITION if self.last_transition is None else HALT_FIXED_POINT
                break
        return self.summary(halt_reason)

    def summary(self, halt_reason) -> RunSummary:
        return RunSummary(
            machine=self.machine.name,
            steps=self.steps,
            final_state=self.current_state,
            head_position=self.head_position,
            first_index=self.tape.first_index(),
            tape=self.tape.render(),
            halt_reason=halt_reason,
        )
