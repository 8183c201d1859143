"""
Core validation logic for the CSV exports.

Checks each configured file against its raw schema and then builds every
entity from it, collecting one result per dataset instead of stopping at
the first failure.
"""

from dataclasses import dataclass
from pathlib import Path

from rideshare.config.settings import DATASETS, RideShareConfig
from rideshare.ingestion.source import read_table, to_rows
from rideshare.schemas.registry import SchemaRegistry
from rideshare.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of validating a single dataset."""

    dataset_name: str
    file_path: Path
    exists: bool
    schema_valid: bool | None
    entities_valid: bool | None
    row_count: int | None
    error_message: str | None

    @property
    def passed(self) -> bool:
        """True when the file exists and every check succeeded."""
        return self.exists and bool(self.schema_valid) and bool(self.entities_valid)


class ValidationRunner:
    """
    Runs validation for all configured datasets.

    Unlike loading, which aborts on the first bad row, the runner keeps
    going so that every file gets a verdict.
    """

    def __init__(self, config: RideShareConfig) -> None:
        """
        Initialize validation runner.

        Args:
            config: Configuration containing data paths.
        """
        self.config = config

    def run(self) -> list[ValidationResult]:
        """Validate every dataset, one result each."""
        return [self._validate_dataset(dataset) for dataset in DATASETS]

    def _validate_dataset(self, dataset: str) -> ValidationResult:
        file_path = self.config.data_paths.resolve(dataset)

        if not file_path.exists():
            log.warning("Data file not found", dataset=dataset, path=str(file_path))
            return ValidationResult(
                dataset_name=dataset,
                file_path=file_path,
                exists=False,
                schema_valid=None,
                entities_valid=None,
                row_count=None,
                error_message="File not found",
            )

        try:
            df = read_table(file_path, dataset)
        except ValueError as e:
            log.error("Schema validation failed", dataset=dataset, error=str(e))
            return ValidationResult(
                dataset_name=dataset,
                file_path=file_path,
                exists=True,
                schema_valid=False,
                entities_valid=None,
                row_count=None,
                error_message=str(e),
            )

        entity = SchemaRegistry.get_info(dataset).entity
        errors: list[str] = []
        # Line 1 is the header, so data rows start at line 2
        for line_no, row in enumerate(to_rows(df)[1:], start=2):
            try:
                entity.from_row(row)
            except ValueError as e:
                errors.append(f"line {line_no}: {_first_line(e)}")

        if errors:
            log.error(
                "Entity validation failed",
                dataset=dataset,
                invalid_rows=len(errors),
            )
        else:
            log.info("Validation passed", dataset=dataset, rows=len(df))

        return ValidationResult(
            dataset_name=dataset,
            file_path=file_path,
            exists=True,
            schema_valid=True,
            entities_valid=not errors,
            row_count=len(df),
            error_message="\n".join(errors) if errors else None,
        )


def _first_line(error: Exception) -> str:
    """Compact one-line form of a (possibly multi-line) error message."""
    lines = [line.strip() for line in str(error).splitlines() if line.strip()]
    return " ".join(lines[:3])
