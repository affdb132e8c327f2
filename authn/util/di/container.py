"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from authn.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every component's production implementation.

    Settings are read from the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can use ``FromDishka``."""
    setup_dishka(container, app)
