"""Read-only handle on a loaded IFC model.

Wraps an ifcopenshell file for the duration of one QA run. The handle is
acquired with ``IfcStore.open`` (or wrapped around an in-memory file) and
used as a context manager; once closed, every traversal through it raises
``ModelClosedError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import ifcopenshell

logger = logging.getLogger(__name__)


class InputNotFoundError(FileNotFoundError):
    """The source path does not resolve to a loadable IFC model."""


class ModelClosedError(RuntimeError):
    """A rule tried to read from a model handle that was already released."""


class IfcStore:
    """A loaded IFC model, held read-only while rules run against it."""

    def __init__(self, file: ifcopenshell.file, path: str = "<memory>"):
        self._file: ifcopenshell.file | None = file
        self.path = path

    @classmethod
    def open(cls, path: str | Path) -> IfcStore:
        """Load an IFC file from disk.

        Raises:
            InputNotFoundError: Empty path, missing file, or a file
                ifcopenshell cannot parse.
        """
        if path is None or not str(path).strip():
            raise InputNotFoundError("IFC path is empty")
        path = Path(path)
        if not path.is_file():
            raise InputNotFoundError(f"IFC file not found: {path}")
        try:
            file = ifcopenshell.open(str(path))
        except (OSError, ifcopenshell.Error) as exc:
            raise InputNotFoundError(f"Unable to load IFC file {path}: {exc}") from exc
        logger.info("Loaded %s (%s)", path, file.schema)
        return cls(file, str(path))

    # ── Lifetime ──────────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self) -> None:
        """Release the underlying file. Idempotent."""
        if self._file is not None:
            logger.debug("Released %s", self.path)
        self._file = None

    def __enter__(self) -> IfcStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── Queries ───────────────────────────────────────────────────────

    @property
    def file(self) -> ifcopenshell.file:
        if self._file is None:
            raise ModelClosedError(f"Model handle for {self.path} is closed")
        return self._file

    @property
    def schema(self) -> str:
        return self.file.schema

    def by_type(self, ifc_type: str) -> list[ifcopenshell.entity_instance]:
        """All instances of ``ifc_type`` (subtypes included), in file order."""
        return sorted(self.file.by_type(ifc_type), key=lambda e: e.id())

    def products(self) -> list[ifcopenshell.entity_instance]:
        """Every IfcProduct in the model, in file order."""
        return self.by_type("IfcProduct")
