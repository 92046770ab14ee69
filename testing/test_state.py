import pytest

from automaton_tools import EpsilonTransitionError
from automaton_tools.automata.state import State
from automaton_tools.automata.transition import (SymbolTransition,
                                                 MaybeEpsilonTransition)

@pytest.fixture
def fanout_state():
    state = State(False, "q0")
    (state.add_transition(SymbolTransition('a', 1))
     .add_transition(SymbolTransition('b', 2))
     .add_transition(SymbolTransition('a', 3)))
    return state

@pytest.fixture
def epsilon_state():
    state = State(True, "q1", MaybeEpsilonTransition)
    state.add_transitions([MaybeEpsilonTransition.new_symbol('a', 0),
                           MaybeEpsilonTransition.new_epsilon(2)])
    return state

def test_state_basics(fanout_state):
    assert fanout_state.data == "q0"
    assert not fanout_state.is_finish()
    assert len(fanout_state.transitions) == 3

def test_next_keeps_order(fanout_state):
    assert fanout_state.next('a') == [1, 3]
    assert fanout_state.next('b') == [2]
    assert fanout_state.next('c') == []

def test_next_skips_epsilon(epsilon_state):
    assert epsilon_state.next('a') == [0]
    assert epsilon_state.has_epsilon()

def test_symbol_transition_promoted():
    state = State(False, None, MaybeEpsilonTransition)
    state.add_transition(SymbolTransition('a', 1))
    assert isinstance(state.transitions[0], MaybeEpsilonTransition)
    assert state.transitions[0] == MaybeEpsilonTransition.new_symbol('a', 1)

def test_epsilon_rejected_by_symbol_state():
    state = State(False, None)
    with pytest.raises(EpsilonTransitionError):
        state.add_transition(MaybeEpsilonTransition.new_epsilon(1))

def test_to_symbol_state_fails_on_epsilon(epsilon_state):
    with pytest.raises(EpsilonTransitionError):
        epsilon_state.to_symbol_state()

def test_state_conversion(fanout_state):
    promoted = State.from_symbol_state(fanout_state)
    assert promoted.transition_type is MaybeEpsilonTransition
    assert promoted.data == fanout_state.data
    assert promoted.finish == fanout_state.finish

    back = promoted.to_symbol_state()
    assert back.transition_type is SymbolTransition
    assert back.transitions == fanout_state.transitions
