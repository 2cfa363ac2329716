"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check covers one category of Phase 2 changes (ADCFs, AICFs, window scale
factors, ...).

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ValidationCheck protocol
3. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from typing import List
    from ..models import CheckResult

    class MyCheck:
        check_id = "my_check"

        def validate(self, source, references, expectations, reporter) -> List[CheckResult]:
            reporter.section("Checking something")
            failures = [...]
            result = CheckResult.from_failures(self.check_id, failures)
            reporter.category(result.passed, "Something is right", "Something is wrong")
            return [result]
    ```
"""

from __future__ import annotations

from typing import List, Protocol

from phase2_check.ingestion.private_nc import DataSource
from phase2_check.reference.registry import Expectations, ReferenceRegistry
from ..models import CheckResult
from ..reporting import Reporter


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Attributes:
        check_id: Identifier of the (first) CheckResult the check produces.
    """

    check_id: str

    def validate(
        self,
        source: DataSource,
        references: ReferenceRegistry,
        expectations: Expectations,
        reporter: Reporter,
    ) -> List[CheckResult]:
        """Run the validation check.

        Every item of the category must be evaluated even after a failure, so
        the report is complete.

        Args:
            source: File being checked.
            references: Parsed reference tables.
            expectations: Fixed attribute and variable-list expectations.
            reporter: Receives every outcome for printing.

        Returns:
            List of CheckResult objects, usually one.

        Raises:
            LookupError: If a required variable is missing.
            TypeError: If an attribute has the wrong type.
            ValueError: If an attribute does not have the expected format.
        """
        ...


__all__ = ["ValidationCheck"]
