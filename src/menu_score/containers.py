"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from menu_score.adapters.supabase_menu_repository import SupabaseMenuRepository
from menu_score.config import Settings
from menu_score.services.menu import MenuService
from menu_score.services.swaps import SwapService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    menu_service: MenuService
    swap_service: SwapService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    menu_repository = SupabaseMenuRepository(supabase_client)
    menu_service = MenuService(
        repository=menu_repository,
        reference_set=resolved_settings.default_reference_set,
        reject_duplicate_customizations=(
            resolved_settings.reject_duplicate_customizations
        ),
    )
    swap_service = SwapService(
        catalog=menu_repository,
        limit=resolved_settings.swap_suggestion_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        menu_service=menu_service,
        swap_service=swap_service,
    )
