from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from core.environment.config import Settings
from core.environment.providers import EnvironmentProvider
from core.logging.providers import LoggerProvider
from exporter.providers import ExporterProvider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """
    Build the application container.

    Parameters
    ----------
    settings : Settings | None
        Settings to use instead of reading the environment

    Returns
    -------
    AsyncContainer
        Configured dishka container
    """
    return make_async_container(
        FastapiProvider(),
        EnvironmentProvider(settings),
        LoggerProvider(),
        ExporterProvider()
    )
