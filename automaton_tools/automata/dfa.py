"""Work with deterministic finite-state automata.

A `DFA` is a flat list of `(payload, transitions)` pairs, where
`transitions` is a dictionary mapping each alphabet symbol to at most
one destination index. State 0 is always the start state. Whether a
state "accepts" is entirely up to the caller, who can store that
information in the payload.

Machines are grown one state at a time through a mutable cursor:

```python
from automaton_tools.automata.dfa import DFA

comment = DFA(False)
(comment.get_start_mut()
 .add_state('/', False)
 .add_state('/', True)
 .add_self_loop(' ')
 .add_state('\\n', True))

comment.traverse("// ").value()
```
    True

"""

import logging

logger = logging.getLogger(__name__)


class StateView:
    """Read-only view of a single state of a `DFA`."""

    __slots__ = ("dfa", "index")

    def __init__(self, dfa, index):
        self.dfa = dfa
        self.index = index

    def __repr__(self):
        return "StateView(index={}, value={!r})".format(
            self.index, self.value()
        )

    def value(self):
        return self.dfa.states[self.index][0]

    def transitions(self):
        return self.dfa.states[self.index][1]

    def next(self, symbol):
        """Follow a symbol from this state.

        Returns
        -------
        StateView or None
            the state reached, or `None` if there is no transition
            for `symbol` or it points at a state that doesn't exist.

        """
        try:
            index = self.dfa.states[self.index][1][symbol]
        except KeyError:
            return None
        return self.dfa.get_state(index)


class MutState:
    """Mutable cursor pointing at a single state of a `DFA`.

    Every method returns a cursor so that construction can be written
    as a chain of calls.

    """

    __slots__ = ("dfa", "index")

    def __init__(self, dfa, index):
        self.dfa = dfa
        self.index = index

    def __repr__(self):
        return "MutState(index={})".format(self.index)

    def value(self):
        return self.dfa.states[self.index][0]

    def set_transition(self, symbol, dest):
        """Point `symbol` at `dest`, replacing any existing destination
        for that symbol.

        Returns
        -------
        MutState
            this cursor.

        """
        self.dfa.states[self.index][1][symbol] = dest
        return self

    def add_self_loop(self, symbol):
        return self.set_transition(symbol, self.index)

    def add_state(self, symbol, payload):
        """Create a new state and connect it to this one.

        Parameters
        ----------
        symbol : object
            label of the transition from this state to the new state.

        payload : object
            payload of the new state.

        Returns
        -------
        MutState
            a cursor pointing at the *new* state.

        """
        new_state = self.dfa.add_state(payload)
        self.set_transition(symbol, new_state.index)
        return new_state

    def extend(self, symbol, other):
        """Splice a copy of the states of another DFA into this one, and
        connect `symbol` from this state to the spliced start state.

        The destination indices of the spliced states are shifted by
        the number of states already in this machine.

        Parameters
        ----------
        symbol : object
            label of the transition into the spliced machine.

        other : DFA
            the machine to splice in. It is left unchanged.

        Returns
        -------
        MutState
            this cursor.

        """
        offset = len(self.dfa.states)
        for payload, transitions in other.states:
            self.dfa.states.append((
                payload,
                {sym: dest + offset for sym, dest in transitions.items()}
            ))

        logger.debug("spliced %d states into DFA at offset %d",
                     len(other.states), offset)
        return self.set_transition(symbol, offset)


class DFA:
    def __init__(self, start):
        """

        Parameters
        ----------
        start : object
            payload of the start state (index 0), which is the only
            state of the new machine.

        """
        self.states = [(start, {})]

    def __len__(self):
        return len(self.states)

    def __repr__(self):
        return "DFA({})".format(
            {i: transitions for i, (_, transitions) in enumerate(self.states)}
        )

    def alphabet(self):
        """Get the set of symbols labelling some transition of this
        machine.

        """
        return {symbol for _, transitions in self.states
                for symbol in transitions}

    def get_start(self):
        return StateView(self, 0)

    def get_start_mut(self):
        return MutState(self, 0)

    def get_state(self, index):
        if index < 0 or index >= len(self.states):
            return None
        return StateView(self, index)

    def get_state_mut(self, index):
        if index < 0 or index >= len(self.states):
            return None
        return MutState(self, index)

    def add_state(self, payload):
        """Append a state with no transitions.

        Returns
        -------
        MutState
            a cursor pointing at the new state.

        """
        self.states.append((payload, {}))
        return MutState(self, len(self.states) - 1)

    def traverse(self, symbols):
        """Follow a sequence of symbols from the start state.

        Parameters
        ----------
        symbols : iterable
            the symbols to follow, e.g. a string.

        Returns
        -------
        StateView or None
            the final state, or `None` if some symbol had no
            transition.

        """
        current = self.get_start()
        for symbol in symbols:
            current = current.next(symbol)
            if current is None:
                return None

        return current
