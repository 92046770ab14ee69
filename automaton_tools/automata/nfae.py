"""Work with nondeterministic automata with epsilon transitions.

An `NFAe` is like an `NFA`, except that its states may also have
epsilon transitions, which are taken without reading any input. Its
main purpose is to be converted into an ordinary `NFA` by
`NFAe.into_nfa`, which runs three passes:

1. `epsilon_simplify_all`: every state absorbs the symbol transitions
   (and the finish flag) of the states in its epsilon closure, and
   loses its own epsilon transitions.

2. `remove_orphan_states`: states which are neither the start state
   nor the destination of any transition are dropped, and the
   surviving states are renumbered.

3. every state is converted to use `SymbolTransition`s.

```python
from automaton_tools.automata.nfae import NFAeBuilder
from automaton_tools.automata.state import State
from automaton_tools.automata.transition import MaybeEpsilonTransition

start = State(False, "start", MaybeEpsilonTransition)
start.add_transition(MaybeEpsilonTransition.new_symbol('a', 1))
middle = State(False, "middle", MaybeEpsilonTransition)
middle.add_transition(MaybeEpsilonTransition.new_epsilon(2))
end = State(True, "end", MaybeEpsilonTransition)

builder = NFAeBuilder()
builder.add_state(start).add_state(middle).add_state(end).set_start(0)
nfa = builder.build().into_nfa()

[state.data for state in nfa.traverse("a")]
```
    ['middle']

"""

import logging

from .. import utils
from .nfa import NFA, validate_machine
from .state import State
from .transition import MaybeEpsilonTransition

logger = logging.getLogger(__name__)


class NFAeBuilder:
    """Accumulate states and a start index for an `NFAe`.

    States built with `SymbolTransition`s are accepted too, and are
    promoted to use `MaybeEpsilonTransition`s.

    """
    def __init__(self, states=None, start=None):
        self.states = []
        self.start = start
        if states is not None:
            for state in states:
                self.add_state(state)

    @classmethod
    def from_nfae(cls, nfae):
        """Get a builder seeded with the states and start index of an
        existing machine.

        The machine gives up its states to the builder and should not
        be used afterwards. Take a `copy.deepcopy` of it first to keep
        both.

        """
        return cls(nfae.states, nfae.start)

    def add_state(self, state):
        if state.transition_type is not MaybeEpsilonTransition:
            state = State.from_symbol_state(state)
        self.states.append(state)
        return self

    def set_start(self, start):
        self.start = start
        return self

    def build(self):
        """Validate the accumulated states and produce an `NFAe`.

        Raises
        ------
        BuildError
            Raised (as one of its subclasses) if the start index is
            missing, there are no states, no state is a finish state,
            or the start index is out of range.

        """
        validate_machine(self.states, self.start, "NFA-e")
        logger.debug("built NFA-e with %d states, start %d",
                     len(self.states), self.start)
        return NFAe(self.states, self.start)


class NFAe:
    def __init__(self, states, start):
        self.states = states
        self.start = start

    def __len__(self):
        return len(self.states)

    def __repr__(self):
        return "NFAe(start={}, states={!r})".format(self.start, self.states)

    def get_state(self, index):
        if index < 0 or index >= len(self.states):
            return None
        return self.states[index]

    def get_states(self):
        return self.states

    def get_start(self):
        return self.states[self.start]

    def alphabet(self):
        return {tr.symbol for state in self.states
                for tr in state.transitions if not tr.is_epsilon()}

    def epsilon_closure_indices(self, index):
        """Get the indices of the states reachable from state `index`
        through zero or more epsilon transitions.

        The indices are listed in depth-first order, starting with
        `index` itself, and each appears once even if the epsilon
        transitions form a cycle. An invalid index has an empty
        closure.

        """
        closure = []
        seen = set()

        to_visit = [index]
        while to_visit:
            current = to_visit.pop()
            if current in seen:
                continue
            state = self.get_state(current)
            if state is None:
                continue

            seen.add(current)
            closure.append(current)

            to_visit.extend(reversed([tr.dest for tr in state.transitions
                                      if tr.is_epsilon()]))

        return closure

    def epsilon_closure(self, index):
        """Get the states reachable from state `index` through zero or more
        epsilon transitions, including the state itself.

        Returns
        -------
        list of State
            the states in the closure, in the order given by
            `epsilon_closure_indices`.

        """
        return [self.states[i] for i in self.epsilon_closure_indices(index)]

    def epsilon_simplify(self, index):
        """Give state `index` the symbol transitions of every state in its
        epsilon closure, and drop its epsilon transitions.

        The state becomes a finish state if anything in its closure is
        a finish state.

        """
        closure = self.epsilon_closure_indices(index)
        if len(closure) == 0:
            return

        state = self.states[index]

        transitions = [tr for tr in state.transitions if not tr.is_epsilon()]
        finish = state.is_finish()

        for other_index in closure[1:]:
            other = self.states[other_index]
            for tr in other.transitions:
                if not tr.is_epsilon() and tr not in transitions:
                    transitions.append(tr.copy())
            finish = finish or other.is_finish()

        state.transitions = transitions
        state.finish = finish

        logger.debug("simplified state %d with epsilon closure of size %d",
                     index, len(closure))

    def epsilon_simplify_all(self):
        """Call `epsilon_simplify` on every state, in index order."""
        for i in range(len(self.states)):
            self.epsilon_simplify(i)

    def remove_orphan_states(self, strict=False):
        """Drop every non-start state with no incoming transitions, and
        renumber the remaining states from 0.

        This must only be called once the machine has no epsilon
        transitions left.

        Parameters
        ----------
        strict : bool
            If `False` (the default), keep every state which is the
            destination of some transition, even if that transition
            starts at a state which is itself unreachable. If `True`,
            keep exactly the states reachable from the start state.

        """
        for state in self.states:
            assert not state.has_epsilon(), \
                "epsilon transition left after simplification"
            for tr in state.transitions:
                assert 0 <= tr.dest < len(self.states), \
                    "transition to nonexistent state {}".format(tr.dest)

        if strict:
            adjacency = utils.adjacency_matrix(self.states)
            reachable = set(utils.reachable_from(adjacency, self.start))
        else:
            reachable = {self.start}
            for state in self.states:
                reachable.update(tr.dest for tr in state.transitions)

        reassign = {}
        new_states = []
        for i, state in enumerate(self.states):
            if i in reachable:
                reassign[i] = len(new_states)
                new_states.append(state)

        for state in new_states:
            renumbered = []
            for tr in state.transitions:
                assert tr.dest in reassign, \
                    "transition to removed state {}".format(tr.dest)
                tr = tr.copy()
                tr.set_dest(reassign[tr.dest])
                renumbered.append(tr)
            state.transitions = renumbered

        logger.debug("removed %d orphan states",
                     len(self.states) - len(new_states))

        self.states = new_states
        self.start = reassign[self.start]

    def into_nfa(self, strict=False):
        """Convert this machine into an equivalent `NFA`.

        The conversion happens in place: afterwards this `NFAe`
        shares its states' data with the new machine and should be
        discarded.

        Parameters
        ----------
        strict : bool
            passed on to `remove_orphan_states`.

        Returns
        -------
        NFA
            a machine with no epsilon transitions, accepting the same
            words as this one.

        """
        self.epsilon_simplify_all()
        self.remove_orphan_states(strict=strict)

        nfa = NFA([state.to_symbol_state() for state in self.states],
                  self.start)
        logger.debug("converted NFA-e into NFA with %d states", len(nfa))
        return nfa

    def accepts(self, symbols):
        """Determine if this machine accepts a sequence of symbols, without
        modifying it.

        """
        current = self.epsilon_closure_indices(self.start)
        for symbol in symbols:
            reached = []
            for index in current:
                for dest in self.states[index].next(symbol):
                    for closure_index in self.epsilon_closure_indices(dest):
                        if closure_index not in reached:
                            reached.append(closure_index)
            current = reached
            if len(current) == 0:
                return False

        return any(self.states[i].is_finish() for i in current)
