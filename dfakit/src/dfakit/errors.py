from __future__ import annotations


class AutomatonError(Exception):
    """Base class for errors raised by dfakit."""


class CodecError(AutomatonError, ValueError):
    """A persisted automaton could not be parsed in strict mode."""

    def __init__(self, message: str, line: int | None = None, field: str | None = None):
        self.line = line
        self.field = field
        location = []
        if line is not None:
            location.append(f"line {line}")
        if field is not None:
            location.append(f"field {field!r}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class AutomatonFileError(AutomatonError):
    """Reading or writing an automaton file failed."""

    def __init__(self, operation: str, path: str, reason: str):
        if operation not in {"load", "save"}:
            raise ValueError("operation must be 'load' or 'save'")
        self.operation = operation
        self.path = path
        self.reason = reason
        preposition = "from" if operation == "load" else "to"
        super().__init__(f"could not {operation} automaton {preposition} {path}: {reason}")
