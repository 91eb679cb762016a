"""Base classes for validation system following OOP and SRP principles"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from image_url_builder.validation.enums import ValidationErrorType


class ValidationError(Exception):
    """A parameter found out of contract. Collected, never raised by validators."""

    def __init__(self, error_type: ValidationErrorType, message: str, parameter_name: Optional[str] = None):
        """
        Initialize validation error.

        Args:
            error_type: Type of validation error (enum)
            message: Human-readable diagnostic, including the remediation applied on serialization
            parameter_name: Field path of the parameter that failed validation
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        super().__init__(message)


class ValidationResult:
    """Result of a validation operation"""

    def __init__(self, errors: Optional[List[ValidationError]] = None):
        """
        Initialize validation result.

        Args:
            errors: Diagnostics already collected
        """
        self._errors = list(errors or [])

    @property
    def is_valid(self) -> bool:
        """Check if no parameter was found out of contract"""
        return not self._errors

    @property
    def errors(self) -> List[ValidationError]:
        """Get list of validation errors"""
        return self._errors

    @property
    def messages(self) -> List[str]:
        """Get diagnostics as strings, in the order they were found"""
        return [str(error) for error in self._errors]

    def add_error(self, error: ValidationError) -> None:
        """
        Add a validation error.

        Args:
            error: Validation error to add
        """
        self._errors.append(error)

    def merge(self, other: "ValidationResult") -> None:
        """Append all errors of another result"""
        self._errors.extend(other.errors)


class BaseValidator(ABC):
    """Abstract base class for all validators (Interface)"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Value to validate
            context: Optional context dictionary with additional information

        Returns:
            ValidationResult with validation status and errors
        """
        pass
