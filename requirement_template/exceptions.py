"""Custom exceptions for the requirement template generator."""

from typing import Optional


class RequirementTemplateError(Exception):
    """Base exception for requirement template errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(RequirementTemplateError):
    """A package part is not well-formed XML."""

    def __init__(self, part_name: str, details: Optional[str] = None):
        super().__init__(f"Failed to parse {part_name}", details)
        self.part_name = part_name


class PackageError(RequirementTemplateError):
    """Exception raised when a file cannot be opened as a zip archive."""

    pass


class TemplateConfigError(RequirementTemplateError):
    """Exception raised for invalid template configuration."""

    pass
