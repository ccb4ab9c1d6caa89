"""
Custom exceptions for the bracket simulator.
"""


class BracketSimError(Exception):
    """Base exception for all custom errors."""
    pass


# Input Errors
class SeedArgumentError(BracketSimError):
    """Raised when the random seed given on the command line is not an integer."""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid random seed {value!r}: expected an integer")


# Bracket Errors
class BracketError(BracketSimError):
    """Raised when a bracket operation is called with malformed input."""
    pass


# Configuration Errors
class ConfigurationError(BracketSimError):
    """Raised when configuration is invalid or missing."""
    pass
