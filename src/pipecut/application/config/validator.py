"""Validation structures and cutting advisory checks.

Schema-level problems are caught by Pydantic when the file is loaded. The
checks here look at the job as a whole and flag runs that will produce an
empty or partial cutting plan.
"""

from dataclasses import dataclass, field
from typing import Any

from pipecut.application.config.schema import OptimizationJobConfiguration


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "parameters.kerf_width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_cutting_advisories(config: OptimizationJobConfiguration) -> ValidationResult:
    """Check a job for inputs that lead to unmet demand.

    Checks:
    - Kerf at least as long as the stock (nothing can ever be cut): error
    - Additional stock specifications that will be ignored: warning
    - Cut lengths that cannot fit a single stock unit with kerf: warning
    - Minimum waste threshold longer than the stock: warning
    - Total demand longer than the stock on hand: warning
    """
    result = ValidationResult()
    stock = config.stock[0]
    kerf = config.parameters.kerf_width

    if kerf >= stock.length:
        result.add_error(
            path="parameters.kerf_width",
            message=(
                f"Kerf width {kerf} mm is not smaller than the stock length "
                f"{stock.length} mm; no piece can be cut"
            ),
            value=kerf,
        )
        return result

    if len(config.stock) > 1:
        result.add_warning(
            path="stock",
            message=(
                f"{len(config.stock)} stock specifications given; only stock[0] "
                "is used for optimization"
            ),
            suggestion="Run a separate job for each stock specification",
        )

    for index, cut in enumerate(config.cuts):
        if cut.quantity > 0 and cut.length + kerf > stock.length:
            result.add_warning(
                path=f"cuts[{index}].length",
                message=(
                    f"Cut length {cut.length} mm plus {kerf} mm kerf exceeds the "
                    f"stock length {stock.length} mm; these pieces will never be cut"
                ),
                suggestion="Use longer stock or split the piece",
            )

    if config.parameters.min_waste_threshold > stock.length:
        result.add_warning(
            path="parameters.min_waste_threshold",
            message=(
                f"Minimum waste threshold {config.parameters.min_waste_threshold} mm "
                f"is longer than the stock length {stock.length} mm; no offcut will "
                "ever count as reusable"
            ),
            suggestion="Lower the threshold below the stock length",
        )

    demand_length = sum((cut.length + kerf) * cut.quantity for cut in config.cuts)
    available_length = stock.length * stock.quantity
    if demand_length > available_length:
        result.add_warning(
            path="stock[0].quantity",
            message=(
                f"Required cuts need at least {demand_length:.0f} mm of pipe "
                f"including kerf, but only {available_length:.0f} mm is available"
            ),
            suggestion="Increase the stock quantity",
        )

    return result


def validate_config(config: OptimizationJobConfiguration) -> ValidationResult:
    """Perform full validation of a loaded job configuration.

    Args:
        config: A configuration that already passed schema validation.

    Returns:
        ValidationResult with errors and advisory warnings.
    """
    return check_cutting_advisories(config)
