"""Builder for profile updates."""

from __future__ import annotations

from typing import Any

from ..core.enums import Visibility


class UpdateCredsRequest:
    """Fluent body for ``PATCH /api/v1/accounts/update_credentials``.

    Only options that were set are sent.
    """

    def __init__(self) -> None:
        self._body: dict[str, Any] = {}
        self._source: dict[str, Any] = {}
        self._fields: list[tuple[str, str]] = []

    def display_name(self, name: str) -> UpdateCredsRequest:
        self._body["display_name"] = name
        return self

    def note(self, note: str) -> UpdateCredsRequest:
        self._body["note"] = note
        return self

    def locked(self, flag: bool = True) -> UpdateCredsRequest:
        self._body["locked"] = flag
        return self

    def bot(self, flag: bool = True) -> UpdateCredsRequest:
        self._body["bot"] = flag
        return self

    def privacy(self, visibility: Visibility) -> UpdateCredsRequest:
        self._source["privacy"] = visibility.value
        return self

    def sensitive(self, flag: bool = True) -> UpdateCredsRequest:
        self._source["sensitive"] = flag
        return self

    def language(self, code: str) -> UpdateCredsRequest:
        self._source["language"] = code
        return self

    def field_attribute(self, name: str, value: str) -> UpdateCredsRequest:
        """Add a profile metadata field (the server keeps at most four)."""
        self._fields.append((name, value))
        return self

    def build(self) -> dict[str, Any]:
        body = dict(self._body)
        if self._source:
            body["source"] = dict(self._source)
        if self._fields:
            body["fields_attributes"] = [
                {"name": name, "value": value} for name, value in self._fields
            ]
        return body
