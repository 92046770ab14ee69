"""Provide numerical utility functions used by the automata in this
package.

All of these work on a list of states whose `transitions` attribute is
a list of objects with `dest` and `symbol` attributes, i.e. the states
of an `NFA` or `NFAe`.

"""

import numpy as np

from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import breadth_first_order

def adjacency_matrix(states, symbol=None, include_epsilon=True):
    """Return the adjacency matrix of the transition graph of a list of
    states.

    Parameters:
    -----------
    states: list of states, indexed the same way as the transition
    destinations.

    symbol: if not None, only count transitions labelled by this
    symbol.

    include_epsilon: if False, skip epsilon transitions. Ignored when
    symbol is given.

    Return:
    ---------
    numpy integer array A of shape (n, n), where A[i, j] is the number
    of transitions from state i to state j.

    """
    n = len(states)
    adj = np.zeros((n, n), dtype=int)
    for i, state in enumerate(states):
        for tr in state.transitions:
            if symbol is not None:
                if tr.is_epsilon() or tr.symbol != symbol:
                    continue
            elif tr.is_epsilon() and not include_epsilon:
                continue
            adj[i, tr.dest] += 1

    return adj

def reachable_from(adjacency, start):
    """Return the sorted list of vertex indices reachable by a directed
    path from start (including start itself).

    """
    order = breadth_first_order(csr_matrix(adjacency), start,
                                directed=True,
                                return_predecessors=False)
    return sorted(int(i) for i in order)

def count_paths(adjacency, start, accepting, length):
    """Count the directed paths of a fixed length from a start vertex to
    any vertex in a set of accepting vertices.

    Parameters:
    -----------
    adjacency: (n, n) integer adjacency matrix, as returned by
    adjacency_matrix.

    start: index of the start vertex.

    accepting: iterable of accepting vertex indices.

    length: number of edges in each path.

    """
    n = adjacency.shape[0]
    # object dtype keeps python ints, which don't overflow
    accept_vec = np.zeros(n, dtype=object)
    accept_vec[list(accepting)] = 1

    power = np.linalg.matrix_power(adjacency.astype(object), length)
    return int(power[start] @ accept_vec)
