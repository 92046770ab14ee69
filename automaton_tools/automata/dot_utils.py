"""dot_utils.py: render automata in the Graphviz DOT language.

The output is a plain string; write it to a file and run `dot` on it
to get a picture.

"""

from .dfa import DFA

EPSILON_LABEL = "&epsilon;"
FINISH_SHAPE = "doublecircle"
STATE_SHAPE = "circle"

def _edge_list(machine):
    if isinstance(machine, DFA):
        for v, (_, transitions) in enumerate(machine.states):
            for label, w in transitions.items():
                yield (v, w, label)
    else:
        for v, state in enumerate(machine.states):
            for tr in state.transitions:
                label = EPSILON_LABEL if tr.is_epsilon() else tr.symbol
                yield (v, tr.dest, label)

def _finish_states(machine):
    if isinstance(machine, DFA):
        return set()
    return {v for v, state in enumerate(machine.states) if state.is_finish()}

def _start_state(machine):
    if isinstance(machine, DFA):
        return 0
    return machine.start

def to_dot(machine, name="FSA", newlines=True):
    """Get a DOT description of a `DFA`, `NFA` or `NFAe`.

    Finish states are drawn as double circles. An invisible vertex
    points at the start state. A `DFA` has no finish flag, so all of its
    states are drawn the same way.

    Parameters
    ----------
    machine : DFA, NFA or NFAe
        the automaton to draw.

    name : string
        name of the digraph.

    newlines : bool
        if `False`, produce the whole graph on a single line.

    Returns
    -------
    string
        the DOT source.

    """
    if newlines:
        newline_char = "\n"
        tab_char = "\t"
    else:
        newline_char = ""
        tab_char = ""

    finish = _finish_states(machine)

    output = "digraph {} {{{}".format(name, newline_char)
    output += '{}__start [shape=point];{}'.format(tab_char, newline_char)
    for v in range(len(machine.states)):
        shape = FINISH_SHAPE if v in finish else STATE_SHAPE
        output += '{}{} [shape={}];{}'.format(
            tab_char, v, shape, newline_char
        )
    output += '{}__start -> {};{}'.format(
        tab_char, _start_state(machine), newline_char
    )
    for v, w, label in _edge_list(machine):
        output += '{}{} -> {} [label="{}"];{}'.format(
            tab_char, v, w, label, newline_char
        )
    output += "}}{}".format(newline_char)
    return output
