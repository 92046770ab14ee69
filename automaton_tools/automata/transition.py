"""Edges of an index-based automaton.

A transition never refers to a state object directly: it stores the
integer index of its destination in the state list of whatever machine
owns it. There are two kinds of transition:

- `SymbolTransition`, which always consumes an alphabet symbol, and

- `MaybeEpsilonTransition`, which either consumes a symbol or is an
  epsilon move (marked by the `EPSILON` constant in place of a symbol).

A symbol transition can always be promoted to a maybe-epsilon
transition. Going the other way fails for epsilon moves:

```python
from automaton_tools.automata.transition import *

tr = MaybeEpsilonTransition.new_symbol('a', 3)
tr.to_symbol_transition()
```
    SymbolTransition('a', 3)

"""

from ..base import EpsilonTransitionError


class _Epsilon:
    """Marker standing in for the symbol of an epsilon transition."""

    def __repr__(self):
        return "EPSILON"

    def __reduce__(self):
        return "EPSILON"

EPSILON = _Epsilon()


class SymbolTransition:
    """A transition which consumes exactly one alphabet symbol."""

    __slots__ = ("symbol", "dest")

    def __init__(self, symbol, dest):
        self.symbol = symbol
        self.dest = dest

    def is_epsilon(self):
        return False

    def set_dest(self, dest):
        self.dest = dest

    def copy(self):
        return SymbolTransition(self.symbol, self.dest)

    def __eq__(self, other):
        if not isinstance(other, SymbolTransition):
            return NotImplemented
        return self.symbol == other.symbol and self.dest == other.dest

    # transitions are mutable through set_dest
    __hash__ = None

    def __repr__(self):
        return "SymbolTransition({!r}, {})".format(self.symbol, self.dest)

    @classmethod
    def coerce(cls, transition):
        if isinstance(transition, cls):
            return transition
        if isinstance(transition, MaybeEpsilonTransition):
            return transition.to_symbol_transition()
        raise TypeError(
            "cannot use {!r} as a symbol transition".format(transition)
        )


class MaybeEpsilonTransition:
    """A transition which either consumes one alphabet symbol or is an
    epsilon move.

    Use the `new_symbol` and `new_epsilon` constructors rather than
    passing `EPSILON` around by hand.

    """

    __slots__ = ("symbol", "dest")

    def __init__(self, symbol, dest):
        self.symbol = symbol
        self.dest = dest

    @classmethod
    def new_symbol(cls, symbol, dest):
        return cls(symbol, dest)

    @classmethod
    def new_epsilon(cls, dest):
        return cls(EPSILON, dest)

    @classmethod
    def from_symbol_transition(cls, transition):
        """Losslessly promote a `SymbolTransition`."""
        return cls(transition.symbol, transition.dest)

    @classmethod
    def coerce(cls, transition):
        if isinstance(transition, cls):
            return transition
        if isinstance(transition, SymbolTransition):
            return cls.from_symbol_transition(transition)
        raise TypeError(
            "cannot use {!r} as a maybe-epsilon transition".format(transition)
        )

    def is_epsilon(self):
        return self.symbol is EPSILON

    def set_dest(self, dest):
        self.dest = dest

    def to_symbol_transition(self):
        """Get the `SymbolTransition` carrying the same symbol and
        destination as this transition.

        Raises
        ------
        EpsilonTransitionError
            Raised if this transition is an epsilon move, since there
            is no symbol to carry over.

        """
        if self.is_epsilon():
            raise EpsilonTransitionError(
                "transition to {} must have a symbol".format(self.dest)
            )
        return SymbolTransition(self.symbol, self.dest)

    def copy(self):
        return MaybeEpsilonTransition(self.symbol, self.dest)

    def __eq__(self, other):
        if not isinstance(other, MaybeEpsilonTransition):
            return NotImplemented
        return self.symbol == other.symbol and self.dest == other.dest

    __hash__ = None

    def __repr__(self):
        if self.is_epsilon():
            return "MaybeEpsilonTransition.new_epsilon({})".format(self.dest)
        return "MaybeEpsilonTransition.new_symbol({!r}, {})".format(
            self.symbol, self.dest
        )
