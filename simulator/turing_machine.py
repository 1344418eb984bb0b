import hashlib
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, NamedTuple, Tuple


class HeadMove(Enum):
    LEFT = -1
    STAY = 0
    RIGHT = 1

    @property
    def offset(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code):
        """Parse the short notation used in rule tables ('L', 'N'/'S', 'R')."""
        codes = {"L": cls.LEFT, "N": cls.STAY, "S": cls.STAY, "R": cls.RIGHT}
        try:
            return codes[code.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown head move code: {code!r}") from None

    @property
    def code(self) -> str:
        return {HeadMove.LEFT: "L", HeadMove.STAY: "N", HeadMove.RIGHT: "R"}[self]


class Transition(NamedTuple):
    curr_symbol: Hashable
    curr_state: Hashable
    next_symbol: Hashable
    next_state: Hashable
    head_move: HeadMove

    def matches(self, symbol, state) -> bool:
        return self.curr_symbol == symbol and self.curr_state == state

    def __str__(self):
        return (f"({self.curr_symbol}, {self.curr_state}) -> "
                f"({self.next_symbol}, {self.next_state}, {self.head_move.name})")


def _as_transition(entry):
    transition = Transition(*entry)
    if not isinstance(transition.head_move, HeadMove):
        transition = transition._replace(head_move=HeadMove.from_code(transition.head_move))
    return transition


@dataclass(frozen=True)
class TuringMachine:
    """
    Immutable machine definition.

    The declared alphabets and state set are descriptive only; execution is
    governed purely by the ordered transition list. When two transitions
    share a (curr_symbol, curr_state) key the one declared first wins.
    """
    transitions: Tuple[Transition, ...]
    start_state: Hashable
    blank_symbol: Hashable
    input_alphabet: Tuple[Hashable, ...] = field(default_factory=tuple)
    states: Tuple[Hashable, ...] = field(default_factory=tuple)
    work_alphabet: Tuple[Hashable, ...] = field(default_factory=tuple)
    name: str = "unnamed"

    def __post_init__(self):
        # freeze caller-supplied lists so the definition can be shared between runs
        object.__setattr__(self, "transitions", tuple(_as_transition(t) for t in self.transitions))
        object.__setattr__(self, "input_alphabet", tuple(self.input_alphabet))
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "work_alphabet", tuple(self.work_alphabet))

    def serialize(self):
        """Canonical list form of the transition table, in declared order."""
        return [
            [str(t.curr_symbol), str(t.curr_state), str(t.next_symbol), str(t.next_state), t.head_move.code]
            for t in self.transitions
        ]

    def fingerprint(self) -> str:
        """Deterministic SHA-256 of the transition table, start state and blank symbol."""
        payload = {
            "transitions": self.serialize(),
            "start_state": str(self.start_state),
            "blank_symbol": str(self.blank_symbol),
        }
        payload_json = json.dumps(payload, sort_keys=True)
        return hashlib.sha256(payload_json.encode("utf-8")).hexdigest()

    def consistency_report(self):
        """
        List the places where the transition table disagrees with the declared
        alphabets and states, plus duplicate (symbol, state) keys.

        Empty declarations are treated as "not declared" and skipped. The
        report is advisory: the machine still runs exactly as written.
        """
        issues = []
        symbols = set(self.input_alphabet) | set(self.work_alphabet)
        states = set(self.states)

        if states and self.start_state not in states:
            issues.append(f"start state {self.start_state!r} is not a declared state")

        seen = {}
        for position, transition in enumerate(self.transitions):
            key = (transition.curr_symbol, transition.curr_state)
            if key in seen:
                issues.append(
                    f"transition #{position} {transition} shadowed by #{seen[key]} "
                    f"for key (symbol={key[0]!r}, state={key[1]!r})"
                )
            else:
                seen[key] = position

            if states:
                for label in dict.fromkeys((transition.curr_state, transition.next_state)):
                    if label not in states:
                        issues.append(f"transition #{position} {transition} uses undeclared state {label!r}")
            if symbols:
                for symbol in dict.fromkeys((transition.curr_symbol, transition.next_symbol)):
                    if symbol not in symbols and symbol != self.blank_symbol:
                        issues.append(f"transition #{position} {transition} uses undeclared symbol {symbol!r}")
        return issues
