# src/montyhall/game/errors.py
"""
Error taxonomy for the Monty Hall simulator

All errors are contract violations: they are raised immediately and never
retried or swallowed.
"""


class MontyHallError(Exception):
    """Base class for all simulator errors"""


class InvalidArgumentError(MontyHallError, ValueError):
    """Caller passed a value outside the accepted domain (door, trial count, config value)"""


class MalformedStateError(MontyHallError, RuntimeError):
    """Game state violates its invariants (not exactly one car, no unique remaining door)"""
