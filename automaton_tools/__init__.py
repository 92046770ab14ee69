r"""
automaton_tools
===============

`automaton_tools` is a small Python package for building and
simplifying finite-state automata over an arbitrary alphabet. It is
meant as a foundation for lexers, regular expression engines, and
protocol state machines: you supply the alphabet and whatever data you
want to attach to each state, and the package supplies the graph
structure, validation, and traversal.

The package provides:

- deterministic automata (`automaton_tools.automata.dfa`), built one
  state at a time through a chainable cursor

- nondeterministic automata (`automaton_tools.automata.nfa`), where a
  symbol may lead to any number of states

- nondeterministic automata with epsilon transitions
  (`automaton_tools.automata.nfae`), which can be converted into
  ordinary nondeterministic automata by epsilon elimination

States refer to each other by their index in the machine's list of
states, never directly, so machines can be renumbered and spliced
together freely.

## Example usage

```python
from automaton_tools.automata import NFAeBuilder, State, MaybeEpsilonTransition

builder = NFAeBuilder()
start = State(False, None, MaybeEpsilonTransition)
start.add_transition(MaybeEpsilonTransition.new_epsilon(1))
builder.add_state(start).add_state(State(True, None)).set_start(0)

nfa = builder.build().into_nfa()
nfa.accepts("")
```
    True

"""

from .base import *
