from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional, Union

from ..common.datetime_utils import now_local
from ..common.validators import validate_deduction_settings
from ..core.constants import DEDUCTION_SETTINGS_CATEGORY, DEDUCTION_SETTINGS_KEY
from ..core.exceptions import SettingsStorageError
from .model import LateDeductionSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class DeductionSettingsService:
    """Policy store for the late-deduction settings.

    Reads never fail: a missing or unreadable value falls back to defaults.
    Writes are validated first and raise SettingsStorageError on storage failure.
    """

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._settings = settings
        self._clock = clock or now_local

    def _timestamp(self) -> str:
        return self._clock().isoformat()

    def get_settings(self) -> LateDeductionSettings:
        try:
            stored = self._settings.get(DEDUCTION_SETTINGS_KEY)
            if stored is None:
                return LateDeductionSettings()
            if not isinstance(stored, dict):
                raise ValueError(f"unexpected settings payload: {type(stored).__name__}")
            return LateDeductionSettings.from_dict(stored)
        except Exception:
            logger.warning("Failed to retrieve deduction settings, using defaults", exc_info=True)
            return LateDeductionSettings()

    def save_settings(self, settings: Union[LateDeductionSettings, dict[str, Any]]) -> LateDeductionSettings:
        if isinstance(settings, dict):
            settings = LateDeductionSettings.from_dict(settings)

        settings = validate_deduction_settings(settings)
        ts = self._timestamp()
        settings = replace(settings, created_at=settings.created_at or ts, updated_at=ts)

        self._persist(settings)
        logger.info(
            "Deduction settings saved",
            extra={"enabled": settings.enabled, "deduction_type": settings.to_dict()["deductionType"]},
        )
        return settings

    def reset_settings(self) -> LateDeductionSettings:
        ts = self._timestamp()
        settings = LateDeductionSettings(created_at=ts, updated_at=ts)
        self._persist(settings)
        logger.info("Deduction settings reset to defaults")
        return settings

    def _persist(self, settings: LateDeductionSettings) -> None:
        try:
            self._settings.save(DEDUCTION_SETTINGS_KEY, settings.to_dict(), DEDUCTION_SETTINGS_CATEGORY)
        except Exception as exc:
            logger.exception("Failed to save deduction settings")
            raise SettingsStorageError("Không thể lưu cấu hình khấu trừ") from exc
