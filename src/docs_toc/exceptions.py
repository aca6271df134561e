from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DocsTocError(Exception):
    """Base exception for errors in the docs_toc module."""

    def __str__(self) -> str:
        return getattr(self, "message", self.__class__.__doc__ or "")


@dataclass(frozen=True)
class DocsDirectoryNotFoundError(DocsTocError):
    """Raised when the documentation directory to scan does not exist."""

    directory: Path
    message: str = "Documentation directory not found."

    def __str__(self) -> str:
        return f"{self.message} ('{self.directory}')"


@dataclass(frozen=True)
class InvalidOptionError(DocsTocError):
    """Raised when a configuration option has an unusable value."""

    option: str
    value: object
    message: str = "Invalid option value."

    def __str__(self) -> str:
        return f"{self.message} {self.option}={self.value!r}"
