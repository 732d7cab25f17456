"""Builder for media uploads."""

from __future__ import annotations

from pathlib import Path


class MediaBuilder:
    """Describes one file for ``POST /api/v1/media``.

    Args:
        file: Path to the file, or its raw bytes
        filename: Name sent with raw bytes (ignored for paths)
    """

    def __init__(self, file: str | Path | bytes, *, filename: str = "file") -> None:
        self.file = file
        self.filename = filename
        self._description: str | None = None
        self._focus: tuple[float, float] | None = None

    def description(self, text: str) -> MediaBuilder:
        self._description = text
        return self

    def focus(self, x: float, y: float) -> MediaBuilder:
        """Focal point, each coordinate in [-1.0, 1.0]."""
        if not (-1.0 <= x <= 1.0 and -1.0 <= y <= 1.0):
            raise ValueError("focus coordinates must be within [-1.0, 1.0]")
        self._focus = (x, y)
        return self

    def files(self) -> dict[str, str | Path | tuple[str, bytes]]:
        if isinstance(self.file, bytes):
            return {"file": (self.filename, self.file)}
        return {"file": self.file}

    def fields(self) -> dict[str, str]:
        out: dict[str, str] = {}
        if self._description is not None:
            out["description"] = self._description
        if self._focus is not None:
            out["focus"] = f"{self._focus[0]},{self._focus[1]}"
        return out
