"""ASGI entrypoint for the recipe API."""

from recipe_api.api.app import create_app
from recipe_api.containers import build_container

app = create_app(build_container())
