"""Synchronous client for the KeuzeKompas API plus headless view state."""

from .api import ApiClient, ApiError
from .catalog import CatalogView
from .favorites import FavoriteState
from .filters import ModuleFilters, active_filter_count, apply_filters
from .forms import LoginForm, ModuleForm, RegisterForm
from .guard import GuardResult, auth_guard
from .modules import ModuleClient
from .session import AuthSession
from .storage import FileStorage, MemoryStorage

__all__ = [
    "ApiClient",
    "ApiError",
    "AuthSession",
    "CatalogView",
    "FavoriteState",
    "FileStorage",
    "GuardResult",
    "LoginForm",
    "MemoryStorage",
    "ModuleClient",
    "ModuleFilters",
    "ModuleForm",
    "RegisterForm",
    "active_filter_count",
    "apply_filters",
    "auth_guard",
]
