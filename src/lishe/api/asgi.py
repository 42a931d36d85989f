"""ASGI entrypoint for the Lishe API."""

from lishe.api.app import create_app
from lishe.containers import build_container

app = create_app(build_container())
