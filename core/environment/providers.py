from dishka import Provider, Scope, provide
from core.environment.config import Settings


class EnvironmentProvider(Provider):
    """
    Provider for environment configuration.

    Parameters
    ----------
    settings : Settings | None
        Prebuilt settings to hand out; read from the environment when omitted
    """

    component = "environment"
    scope = Scope.APP

    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self._settings = settings

    @provide
    def get_environment(self) -> Settings:
        """
        Provide exporter settings.

        Returns
        -------
        Settings
            Settings instance shared for the life of the process
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings
