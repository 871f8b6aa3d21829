from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Assumption:
    """
    A single modelling assumption behind a causal reading of an estimate.

    Results expose their assumptions via ``result.assumptions``. The
    ``testable`` flag says whether the data can speak to the assumption or
    whether it has to be argued from knowledge of how treatment was assigned.
    """

    name: str
    """Human-readable description of the assumption."""

    testable: bool
    """``True`` if a diagnostic in ``refute()`` checks it."""

    def fmt_tag(self) -> str:
        """Fixed-width bracketed testability label for summary output."""
        return "[  testable  ]" if self.testable else "[ untestable ]"


@dataclass(frozen=True)
class RefutationCheck:
    """Outcome of one diagnostic check."""

    name: str
    passed: bool
    detail: str
    statistic: float | None = None
    """The number the check was decided on, when there is one."""

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"

    def __repr__(self) -> str:
        return f"RefutationCheck({self.status!r}, {self.name!r})"


class RefutationReport:
    """
    A set of diagnostic checks run against one estimate.

    Subclasses supply ``title`` for the heading of ``summary()``.
    """

    title = "Refutation Report"

    def __init__(
        self,
        checks: list[RefutationCheck],
        treatment: str,
        outcome: str,
    ) -> None:
        self._checks = checks
        self._treatment = treatment
        self._outcome = outcome

    @property
    def checks(self) -> list[RefutationCheck]:
        """All checks, in the order they were run."""
        return list(self._checks)

    @property
    def passed(self) -> bool:
        """``True`` if every check passed."""
        return all(c.passed for c in self._checks)

    @property
    def failed_checks(self) -> list[RefutationCheck]:
        """Only the checks that did not pass."""
        return [c for c in self._checks if not c.passed]

    def summary(self) -> str:
        """Each check on its own line, followed by the overall verdict."""
        lines = [
            "",
            f"{self.title}: {self._treatment} → {self._outcome}",
            "─" * 50,
        ]
        lines += [f"  [{c.status}]  {c.name}: {c.detail}" for c in self._checks]
        lines.append("")
        if self.passed:
            lines.append("  All checks passed.")
        else:
            lines.append(f"  {len(self.failed_checks)} check(s) failed, see above.")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()
