from dishka import Provider, Scope, provide, FromComponent
from exporter.decoders import ResponseDecoder
from exporter.services import EtherscanClient, FixtureSource, UpstreamSource
from exporter.usecases import CollectMetricsUseCase
from typing import Annotated
from core.environment.config import Settings
import logging


class ExporterProvider(Provider):
    """
    Provider for exporter dependencies.
    """

    component = "exporter"

    @provide(scope=Scope.APP)
    def get_upstream_source(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> UpstreamSource:
        """
        Provide the source of explorer response bodies.

        Parameters
        ----------
        settings : Settings
            Exporter settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        UpstreamSource
            Fixture source in test mode, explorer client otherwise
        """
        if settings.test_mode:
            return FixtureSource(logger=logger, fixtures_dir=settings.fixtures_dir)
        return EtherscanClient(logger=logger, timeout=settings.request_timeout)

    @provide(scope=Scope.APP)
    def get_response_decoder(
        self,
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> ResponseDecoder:
        """
        Provide response decoder.

        Parameters
        ----------
        logger : logging.Logger
            Logger instance

        Returns
        -------
        ResponseDecoder
            Response decoder instance
        """
        return ResponseDecoder(logger=logger)

    @provide(scope=Scope.REQUEST)
    def get_collect_metrics_use_case(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        source: Annotated[UpstreamSource, FromComponent("exporter")],
        decoder: Annotated[ResponseDecoder, FromComponent("exporter")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> CollectMetricsUseCase:
        """
        Provide collect metrics use case.

        Parameters
        ----------
        settings : Settings
            Exporter settings
        source : UpstreamSource
            Source of explorer response bodies
        decoder : ResponseDecoder
            Response decoder
        logger : logging.Logger
            Logger instance

        Returns
        -------
        CollectMetricsUseCase
            Collect metrics use case
        """
        return CollectMetricsUseCase(
            settings=settings,
            source=source,
            decoder=decoder,
            logger=logger
        )
