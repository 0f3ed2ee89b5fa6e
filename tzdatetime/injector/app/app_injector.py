from tzdatetime.db._api import Db
from tzdatetime.injector._api import (
    APP_INJECTOR_FLAG,
    AppScope,
    Injector,
    Module,
    app_scope,
    provider,
)
from tzdatetime.settings._api import TzDatetimeSettings
from tzdatetime.tzdb._api import TimeZoneDatabase, make_time_zone_database


class AppModule(Module):
    """Main application module configuring dependency injection bindings."""

    def __init__(self, settings: TzDatetimeSettings | None = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else TzDatetimeSettings()

    @app_scope
    @provider
    def provide_settings(self) -> TzDatetimeSettings:
        return self.settings

    @app_scope
    @provider
    def provide_time_zone_database(
        self, settings: TzDatetimeSettings
    ) -> TimeZoneDatabase:
        """Created once per app, so a misconfiguration is only reported once."""
        return make_time_zone_database(settings.time_zone_database)

    @app_scope
    @provider
    def provide_db(self, settings: TzDatetimeSettings) -> Db:
        return Db(settings)


def create_app_injector(settings: TzDatetimeSettings | None = None) -> Injector:
    """Create and configure the dependency injection container."""
    injector = Injector([AppModule(settings=settings)])
    setattr(injector, APP_INJECTOR_FLAG, True)
    return injector


def teardown_app_injector(injector: Injector) -> None:
    injector.get(AppScope).teardown()
