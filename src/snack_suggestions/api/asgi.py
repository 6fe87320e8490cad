"""ASGI entrypoint for the snack suggestions API."""

from snack_suggestions.api.app import create_app
from snack_suggestions.containers import build_container

app = create_app(build_container())
