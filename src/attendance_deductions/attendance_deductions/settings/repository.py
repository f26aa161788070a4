from __future__ import annotations

from typing import Any, Optional, Protocol

from .model import LateDeductionSettings


class SettingsRepository(Protocol):
    """Key/value store for system settings (JSON objects)."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def save(self, key: str, value: dict[str, Any], category: str) -> None:
        raise NotImplementedError


class DeductionSettingsProvider(Protocol):
    """Supplies the single active deduction policy."""

    def get_settings(self) -> LateDeductionSettings:
        raise NotImplementedError
