"""Settings domain service."""

from enum import Enum
from typing import TypeVar, Union

from fintrack.domain.entities import Currency, Language, Settings, Theme
from fintrack.domain.errors import ValidationError, invalid_choice
from fintrack.domain.store import Store

E = TypeVar("E", bound=Enum)


def _coerce(enum_type: type[E], field: str, value: Union[str, E]) -> E:
    if isinstance(value, enum_type):
        return value
    text = str(value).strip()
    for member in enum_type:
        if member.value.lower() == text.lower():
            return member
    raise ValidationError(invalid_choice(field, value, [m.value for m in enum_type]))


class SettingsService:
    """Service for reading and changing user preferences."""

    def __init__(self, store: Store):
        self.store = store

    def get_settings(self) -> Settings:
        return self.store.settings

    def set_language(self, language: Union[str, Language]) -> Language:
        value = _coerce(Language, "language", language)
        self.store.set_language(value)
        return value

    def set_currency(self, currency: Union[str, Currency]) -> Currency:
        value = _coerce(Currency, "currency", currency)
        self.store.set_currency(value)
        return value

    def set_theme(self, theme: Union[str, Theme]) -> Theme:
        value = _coerce(Theme, "theme", theme)
        self.store.set_theme(value)
        return value

    def set_notifications(self, enabled: bool) -> None:
        self.store.set_notifications(bool(enabled))
