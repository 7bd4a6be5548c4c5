# Custom exceptions for reactive-unwrap

class ReactiveUnwrapError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ParserError(ReactiveUnwrapError):
    """Raised when a file cannot be parsed by tree-sitter."""
    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Failed to parse {file_path}: {message}")

class GrammarNotFoundError(ReactiveUnwrapError):
    """Raised when a required tree-sitter grammar is not found."""
    def __init__(self, language: str, install_command: str):
        self.language = language
        self.install_command = install_command
        super().__init__(
            f"Grammar for '{language}' not found. Install it with: {install_command}"
        )

class ConfigError(ReactiveUnwrapError):
    """Raised for configuration-related problems."""
    pass


class PreconditionError(ReactiveUnwrapError, AssertionError):
    """
    Raised when a reference handed to the rewriter violates an invariant
    that the reference-collection phase must guarantee.

    This is not recoverable: the caller produced an invalid reference.
    """

    def __init__(self, message: str, file_path: str = "", position: int = -1):
        self.file_path = file_path
        self.position = position
        if file_path:
            message = f"{message} ({file_path}:{position})"
        super().__init__(message)
