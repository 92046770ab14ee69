"""The node type shared by the nondeterministic machines.

A `State` holds arbitrary caller data, a finish flag, and an ordered
list of outgoing transitions. Every transition in the list has the same
type, which is fixed when the state is created: `SymbolTransition` for
states of an `NFA`, `MaybeEpsilonTransition` for states of an `NFAe`.

"""

from .transition import SymbolTransition, MaybeEpsilonTransition


class State:
    def __init__(self, finish, data, transition_type=SymbolTransition):
        """

        Parameters
        ----------
        finish : bool
            whether this state is a finish (accept) state.

        data : object
            arbitrary data attached to this state. The automata never
            look at it.

        transition_type : type
            either `SymbolTransition` (the default) or
            `MaybeEpsilonTransition`. Transitions added to the state
            are coerced to this type.

        """
        self.data = data
        self.finish = finish
        self.transition_type = transition_type
        self.transitions = []

    def __repr__(self):
        return "State(finish={}, data={!r}, transitions={!r})".format(
            self.finish, self.data, self.transitions
        )

    def is_finish(self):
        return self.finish

    def add_transition(self, transition):
        """Append a transition to this state.

        Returns
        -------
        State
            this state, so that calls can be chained.

        """
        self.transitions.append(self.transition_type.coerce(transition))
        return self

    def add_transitions(self, transitions):
        for transition in transitions:
            self.add_transition(transition)
        return self

    def next(self, symbol):
        """Find the state indices that the given symbol leads to from this
        state.

        Parameters
        ----------
        symbol : object
            alphabet symbol to follow.

        Returns
        -------
        list of int
            destination indices, in the order the transitions were
            added. Epsilon transitions are never followed.

        """
        return [tr.dest for tr in self.transitions
                if not tr.is_epsilon() and tr.symbol == symbol]

    def has_epsilon(self):
        return any(tr.is_epsilon() for tr in self.transitions)

    def to_symbol_state(self):
        """Get a copy of this state whose transitions are all
        `SymbolTransition`s.

        Raises
        ------
        EpsilonTransitionError
            Raised if any transition of this state is an epsilon move.

        """
        new_state = State(self.finish, self.data, SymbolTransition)
        new_state.transitions = [SymbolTransition.coerce(tr).copy()
                                 for tr in self.transitions]
        return new_state

    def to_epsilon_state(self):
        """Get a copy of this state whose transitions are all
        `MaybeEpsilonTransition`s. This never fails.

        """
        new_state = State(self.finish, self.data, MaybeEpsilonTransition)
        new_state.transitions = [MaybeEpsilonTransition.coerce(tr).copy()
                                 for tr in self.transitions]
        return new_state

    @classmethod
    def from_symbol_state(cls, state):
        return state.to_epsilon_state()
