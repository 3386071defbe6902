# SPDX-License-Identifier: MIT


class SolarworkError(Exception):
    """Base class for errors shown to the user as notifications."""

    pass


class WorkEntryValidationError(SolarworkError):
    """Raised when work entry validation fails."""

    pass


class ProjectValidationError(SolarworkError):
    """Raised when a project or worker change is not allowed."""

    pass


class ImportDataError(SolarworkError):
    """Raised when an import payload cannot be read or merged."""

    pass


class BlobStoreError(SolarworkError):
    """Raised when the blob store cannot read or write a document."""

    pass
