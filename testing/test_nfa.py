import pytest
import numpy as np

from automaton_tools import (BuildError, MissingStartIndex, MissingStates,
                             MissingFinish, InvalidStartIndex,
                             EpsilonTransitionError)
from automaton_tools.automata.nfa import NFA, NFABuilder
from automaton_tools.automata.state import State
from automaton_tools.automata.transition import (SymbolTransition,
                                                 MaybeEpsilonTransition)

@pytest.fixture
def fanout_states():
    start = State(False, 0)
    x = State(False, 1)
    y = State(False, 2)
    z = State(True, 3)

    (start.add_transition(SymbolTransition('a', 1))
     .add_transition(SymbolTransition('a', 2)))
    x.add_transition(SymbolTransition('b', 3))
    y.add_transition(SymbolTransition('c', 3))

    return [start, x, y, z]

@pytest.fixture
def fanout_nfa(fanout_states):
    builder = NFABuilder()
    for state in fanout_states:
        builder.add_state(state)
    return builder.set_start(0).build()

def data(states):
    return [state.data for state in states]

def test_build_missing_start(fanout_states):
    with pytest.raises(MissingStartIndex):
        NFABuilder(fanout_states).build()

def test_build_missing_states():
    with pytest.raises(MissingStates):
        NFABuilder().set_start(0).build()

def test_build_missing_finish():
    builder = NFABuilder([State(False, 0), State(False, 1)])
    with pytest.raises(MissingFinish):
        builder.set_start(0).build()

def test_build_invalid_start(fanout_states):
    with pytest.raises(InvalidStartIndex):
        NFABuilder(fanout_states, start=4).build()

def test_build_error_order():
    # no start and no states: the start index is checked first
    with pytest.raises(MissingStartIndex):
        NFABuilder().build()

    # no finish and bad start: finish is checked first
    with pytest.raises(MissingFinish):
        NFABuilder([State(False, 0)], start=3).build()

def test_build_errors_share_base():
    with pytest.raises(BuildError):
        NFABuilder().build()

def test_build_success(fanout_nfa):
    assert len(fanout_nfa) == 4
    assert fanout_nfa.start == 0
    assert fanout_nfa.get_start().data == 0

def test_set_start_last_write_wins(fanout_states):
    nfa = NFABuilder(fanout_states).set_start(9).set_start(1).build()
    assert nfa.start == 1

def test_forward_reference_warns():
    start = State(True, 0)
    start.add_transition(SymbolTransition('a', 5))
    with pytest.warns(UserWarning):
        nfa = NFABuilder([start], start=0).build()

    # the dangling branch just dies
    assert nfa.traverse("a") == []

def test_epsilon_state_rejected():
    state = State(True, 0, MaybeEpsilonTransition)
    state.add_transition(MaybeEpsilonTransition.new_epsilon(0))
    with pytest.raises(EpsilonTransitionError):
        NFABuilder().add_state(state)

def test_maybe_epsilon_state_converted():
    state = State(True, 0, MaybeEpsilonTransition)
    state.add_transition(MaybeEpsilonTransition.new_symbol('a', 0))
    nfa = NFABuilder([state], start=0).build()
    assert nfa.get_start().transition_type is SymbolTransition
    assert nfa.accepts("aaa")

def test_get_state(fanout_nfa):
    assert fanout_nfa.get_state(2).data == 2
    assert fanout_nfa.get_state(4) is None
    assert fanout_nfa.get_state(-1) is None

def test_next(fanout_nfa):
    assert fanout_nfa.next(0, 'a') == [1, 2]
    assert fanout_nfa.next(0, 'b') == []
    assert fanout_nfa.next(1, 'b') == [3]
    assert fanout_nfa.next(7, 'a') == []

def test_traverse_fanout(fanout_nfa):
    assert data(fanout_nfa.traverse(['a'])) == [1, 2]
    assert data(fanout_nfa.traverse(['a', 'b'])) == [3]
    assert data(fanout_nfa.traverse(['a', 'c'])) == [3]

def test_traverse_empty_input(fanout_nfa):
    assert data(fanout_nfa.traverse([])) == [0]

def test_traverse_miss(fanout_nfa):
    assert fanout_nfa.traverse("b") == []
    assert fanout_nfa.traverse("abc") == []

def test_traverse_from(fanout_nfa):
    assert data(fanout_nfa.traverse_from(2, "c")) == [3]
    assert fanout_nfa.traverse_from(10, "") == []

def test_traverse_duplicate_paths():
    start = State(False, "s")
    start.add_transitions([SymbolTransition('a', 1),
                           SymbolTransition('a', 2)])
    left = State(False, "l")
    left.add_transition(SymbolTransition('b', 3))
    right = State(False, "r")
    right.add_transition(SymbolTransition('b', 3))
    end = State(True, "e")

    nfa = NFABuilder([start, left, right, end], start=0).build()
    # one result per live branch
    assert data(nfa.traverse("ab")) == ["e", "e"]

def test_accepts(fanout_nfa):
    assert fanout_nfa.accepts("ab")
    assert fanout_nfa.accepts("ac")
    assert not fanout_nfa.accepts("a")
    assert not fanout_nfa.accepts("abb")

def test_alphabet(fanout_nfa):
    assert fanout_nfa.alphabet() == {'a', 'b', 'c'}

def test_adjacency_matrix(fanout_nfa):
    assert np.array_equal(
        fanout_nfa.adjacency_matrix(),
        np.array([[0, 1, 1, 0],
                  [0, 0, 0, 1],
                  [0, 0, 0, 1],
                  [0, 0, 0, 0]])
    )
    assert np.array_equal(
        fanout_nfa.adjacency_matrix('b'),
        np.array([[0, 0, 0, 0],
                  [0, 0, 0, 1],
                  [0, 0, 0, 0],
                  [0, 0, 0, 0]])
    )

def test_count_accepting_paths(fanout_nfa):
    assert fanout_nfa.count_accepting_paths(0) == 0
    assert fanout_nfa.count_accepting_paths(1) == 0
    assert fanout_nfa.count_accepting_paths(2) == 2
    assert fanout_nfa.count_accepting_paths(3) == 0

def test_reachable_states(fanout_states):
    orphan = State(False, 4)
    orphan.add_transition(SymbolTransition('a', 0))
    fanout_states.append(orphan)

    nfa = NFABuilder(fanout_states, start=0).build()
    assert nfa.reachable_states() == [0, 1, 2, 3]

    nfa = NFABuilder.from_nfa(nfa).set_start(1).build()
    assert nfa.reachable_states() == [1, 3]

def test_builder_from_nfa(fanout_nfa):
    builder = NFABuilder.from_nfa(fanout_nfa)
    assert builder.start == 0

    extra = State(True, 4)
    builder.states[3].add_transition(SymbolTransition('d', 4))
    nfa = builder.add_state(extra).build()

    assert len(nfa) == 5
    assert data(nfa.traverse("abd")) == [4]

def test_count_accepting_paths_large():
    state = State(True, 0)
    state.add_transitions([SymbolTransition('a', 0),
                           SymbolTransition('b', 0)])
    nfa = NFABuilder([state], start=0).build()

    assert nfa.count_accepting_paths(64) == 2**64
    assert nfa.count_accepting_paths(100) == 2**100
