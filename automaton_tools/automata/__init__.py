r"""Work with finite-state automata.

The `automata` package provides three kinds of machine:

- `automaton_tools.automata.dfa.DFA`, a deterministic automaton whose
  states carry a payload and a dictionary of transitions,

- `automaton_tools.automata.nfa.NFA`, a nondeterministic automaton
  made of `State`s with symbol transitions, and

- `automaton_tools.automata.nfae.NFAe`, a nondeterministic automaton
  whose states may also have epsilon transitions.

Below, we build an automaton accepting `ab` or `ac`, with an epsilon
move in the middle, and convert it into an ordinary NFA:

```python

from automaton_tools.automata import NFAeBuilder, State, MaybeEpsilonTransition

states = [State(False, n, MaybeEpsilonTransition) for n in range(4)]
states[0].add_transition(MaybeEpsilonTransition.new_symbol('a', 1))
states[1].add_transition(MaybeEpsilonTransition.new_epsilon(2))
states[2].add_transitions([MaybeEpsilonTransition.new_symbol('b', 3),
                           MaybeEpsilonTransition.new_symbol('c', 3)])
states[3].finish = True

nfa = NFAeBuilder(states, start=0).build().into_nfa()

[nfa.accepts(word) for word in ["ab", "ac", "a", "b"]]

```
	[True, True, False, False]

The package does *not* turn regular expressions into automata, and it
does not determinize or minimize them.

"""

from .transition import SymbolTransition, MaybeEpsilonTransition, EPSILON
from .state import State
from .dfa import DFA, StateView, MutState
from .nfa import NFA, NFABuilder
from .nfae import NFAe, NFAeBuilder
from .dot_utils import to_dot
