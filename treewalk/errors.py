from dataclasses import dataclass


@dataclass
class ErrorVal:
    """Describes a treewalk runtime error: its kind and a readable message."""
    name: str
    message: str


class TreeWalkError(Exception):
    """Exception type used to propagate treewalk runtime errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"TreeWalkError: {err.name}: {err.message}")
        self.err = err


class DivisionByZero(TreeWalkError):
    """Raised when a Divide operator is evaluated with a zero right operand."""
    def __init__(self, message: str = 'division by zero'):
        super().__init__(ErrorVal('DivisionByZero', message))


class EnvironmentBusy(TreeWalkError):
    """Raised when an Environment is already in use by another execution."""
    def __init__(self, message: str = 'environment is in use by another execution'):
        super().__init__(ErrorVal('EnvironmentBusy', message))


class AstFormatError(TreeWalkError):
    """Raised when a serialized AST document is malformed."""
    def __init__(self, message: str):
        super().__init__(ErrorVal('AstFormatError', message))
