"""Domain layer for fintrack application."""

_SERVICES = {
    "Store": "fintrack.domain.store",
    "TransactionService": "fintrack.domain.transaction",
    "CategoryService": "fintrack.domain.category",
    "SettingsService": "fintrack.domain.settings",
    "SummaryService": "fintrack.domain.summary",
}


# Import services lazily so that utils can import entities without a cycle
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = list(_SERVICES)
