"""ASGI entrypoint for the menu score API."""

from menu_score.api.app import create_app
from menu_score.containers import build_container

app = create_app(build_container())
