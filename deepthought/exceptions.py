"""
Exceptions raised by the Deep Thought agent.

Decision errors mean a request could not be turned into a legal action.
Statistics errors are configuration problems found at startup.
"""


class DecisionError(Exception):
    """Base class for failures to pick an action."""


class NoLegalActionsError(DecisionError, ValueError):
    """The server asked for a decision without offering any action."""


class UnhandledPhaseError(DecisionError):
    """An action was requested in a phase the engine has no rules for."""


class NoFoldAvailableError(DecisionError):
    """A rule chain fell through to FOLD but FOLD was not offered."""


class StatisticsError(Exception):
    """Starting-hand statistics are missing or malformed."""
