"""Work with nondeterministic finite-state automata.

An `NFA` is a list of `State` objects (with `SymbolTransition`
transitions) together with the index of the start state. A symbol may
lead from a state to any number of destinations, so traversing a word
can end in several states at once.

Machines are put together with an `NFABuilder`:

```python
from automaton_tools.automata.nfa import NFABuilder
from automaton_tools.automata.state import State
from automaton_tools.automata.transition import SymbolTransition

start = State(False, 0)
start.add_transition(SymbolTransition('a', 1))
start.add_transition(SymbolTransition('a', 2))

builder = NFABuilder()
builder.add_state(start).add_state(State(True, 1)).add_state(State(True, 2))
nfa = builder.set_start(0).build()

[state.data for state in nfa.traverse("a")]
```
    [1, 2]

"""

import logging
import warnings

from .. import utils
from ..base import (MissingStartIndex, MissingStates, MissingFinish,
                    InvalidStartIndex)
from .transition import SymbolTransition

logger = logging.getLogger(__name__)


def validate_machine(states, start, kind="NFA"):
    """Check that a list of states and a start index describe a valid
    nondeterministic machine.

    The conditions are checked in order, and the first one violated
    raises the corresponding `BuildError`.

    Parameters
    ----------
    states : list of State
        candidate states for the machine.

    start : int or None
        candidate start index.

    kind : string
        name of the machine type, used in error messages.

    Raises
    ------
    MissingStartIndex, MissingStates, MissingFinish, InvalidStartIndex

    """
    if start is None:
        raise MissingStartIndex("must specify a start index")

    if len(states) == 0:
        raise MissingStates("{} must have at least one state".format(kind))

    if not any(state.is_finish() for state in states):
        raise MissingFinish("{} must have at least one finish".format(kind))

    if start < 0 or start >= len(states):
        raise InvalidStartIndex(
            "start index {} must be valid for {} states".format(
                start, len(states))
        )

    for i, state in enumerate(states):
        for tr in state.transitions:
            if tr.dest < 0 or tr.dest >= len(states):
                warnings.warn(
                    "state {} has a transition to nonexistent state {}".format(
                        i, tr.dest)
                )


class NFABuilder:
    """Accumulate states and a start index for an `NFA`.

    Nothing is checked until `build` is called, so transitions may
    refer to states which haven't been added yet.

    """
    def __init__(self, states=None, start=None):
        self.states = []
        self.start = start
        if states is not None:
            for state in states:
                self.add_state(state)

    @classmethod
    def from_nfa(cls, nfa):
        """Get a builder seeded with the states and start index of an
        existing machine, e.g. to extend it with new states.

        The machine gives up its states to the builder and should not
        be used afterwards.

        """
        return cls(nfa.states, nfa.start)

    def add_state(self, state):
        """Append a state to the machine under construction.

        `State`s created with `MaybeEpsilonTransition` transitions are
        converted, which fails with `EpsilonTransitionError` if they
        hold an epsilon move.

        Returns
        -------
        NFABuilder
            this builder.

        """
        if state.transition_type is not SymbolTransition:
            state = state.to_symbol_state()
        self.states.append(state)
        return self

    def set_start(self, start):
        self.start = start
        return self

    def build(self):
        """Validate the accumulated states and produce an `NFA`.

        Raises
        ------
        BuildError
            Raised (as one of its subclasses) if the start index is
            missing, there are no states, no state is a finish state,
            or the start index is out of range.

        """
        validate_machine(self.states, self.start, "NFA")
        logger.debug("built NFA with %d states, start %d",
                     len(self.states), self.start)
        return NFA(self.states, self.start)


class NFA:
    def __init__(self, states, start):
        """Use `NFABuilder` (or `NFAe.into_nfa`) rather than calling this
        directly: the constructor does not validate its input.

        """
        self.states = states
        self.start = start

    @classmethod
    def from_nfae(cls, nfae):
        return nfae.into_nfa()

    def __len__(self):
        return len(self.states)

    def __repr__(self):
        return "NFA(start={}, states={!r})".format(self.start, self.states)

    def get_state(self, index):
        if index < 0 or index >= len(self.states):
            return None
        return self.states[index]

    def get_start(self):
        return self.states[self.start]

    def alphabet(self):
        return {tr.symbol for state in self.states
                for tr in state.transitions}

    def next(self, index, symbol):
        """Get the indices of the states reachable from state `index` by
        reading exactly `symbol`, in transition order.

        """
        state = self.get_state(index)
        if state is None:
            return []
        return state.next(symbol)

    def traverse_from(self, index, symbols):
        """Follow every path labelled by a sequence of symbols from a given
        state.

        Parameters
        ----------
        index : int
            index of the state to start from.

        symbols : iterable
            the symbols to follow.

        Returns
        -------
        list of State
            the states at the end of each path, in depth-first order
            of the branches. A branch with no transition for the
            current symbol contributes nothing. If `index` is not a
            valid state, the list is empty.

        """
        symbols = tuple(symbols)
        ends = []

        to_visit = [(index, 0)]
        while to_visit:
            current, position = to_visit.pop()
            state = self.get_state(current)
            if state is None:
                continue

            if position == len(symbols):
                ends.append(state)
                continue

            for dest in reversed(state.next(symbols[position])):
                to_visit.append((dest, position + 1))

        return ends

    def traverse(self, symbols):
        return self.traverse_from(self.start, symbols)

    def accepts(self, symbols):
        """Determine if some path labelled by `symbols` from the start
        state ends at a finish state.

        """
        return any(state.is_finish() for state in self.traverse(symbols))

    def adjacency_matrix(self, symbol=None):
        """Get the integer adjacency matrix of this machine's transition
        graph. If `symbol` is given, only count transitions with that
        label.

        """
        return utils.adjacency_matrix(self.states, symbol=symbol)

    def reachable_states(self):
        """Get the sorted indices of the states reachable from the start
        state.

        """
        return utils.reachable_from(self.adjacency_matrix(), self.start)

    def count_accepting_paths(self, length):
        """Count the paths of a fixed length from the start state which end
        at a finish state.

        Each path reads a word of length `length`. A word read along
        several paths is counted once per path.

        """
        finish_states = [i for i, state in enumerate(self.states)
                         if state.is_finish()]
        return utils.count_paths(self.adjacency_matrix(), self.start,
                                 finish_states, length)
