"""ASGI entrypoint for the nutrition statistics API."""

from nutrition_stats.api.app import create_app
from nutrition_stats.containers import build_container

app = create_app(build_container())
