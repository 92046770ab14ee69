class AutomatonError(Exception):
    """Base class for every error raised by `automaton_tools`."""
    pass

class BuildError(AutomatonError):
    """Thrown if a builder is asked to produce a machine from a set of
    states that doesn't make sense for that type of machine.

    """
    pass

class MissingStartIndex(BuildError):
    pass

class MissingStates(BuildError):
    pass

class MissingFinish(BuildError):
    pass

class InvalidStartIndex(BuildError):
    pass

class EpsilonTransitionError(AutomatonError, ValueError):
    """Thrown when an epsilon transition is converted into a transition
    that must carry an alphabet symbol.

    """
    pass
