"""
Custom scopes for dependency injection.
Using a separate file avoids circular import.
"""

import logging

from injector import Injector, InstanceProvider, ScopeDecorator, SingletonScope

log = logging.getLogger(__name__)


class ScopeGivenWrongInjectorException(Exception):
    """Exception raised when a scope is given an injector of the wrong type."""


class TeardownSingletonScope(SingletonScope):
    """Scope that detects and runs teardown handlers on objects."""

    def teardown(self):
        """Tear down the scope, cleaning up instances."""

        # Tear down in reverse order of instantiation.
        for provider in reversed(list(self._context.values())):
            if not isinstance(provider, InstanceProvider):
                continue
            instance = provider._instance
            if hasattr(instance, 'teardown'):
                log.debug('Tearing down %r', instance)
                instance.teardown()
        self._context.clear()


APP_INJECTOR_FLAG = '__APP_INJECTOR__'


class AppScope(TeardownSingletonScope):
    """Scope for objects living as long as the app injector: settings, the
    time zone database, the database engine."""

    def __init__(self, injector: Injector) -> None:
        if not getattr(injector, APP_INJECTOR_FLAG, False):
            raise ScopeGivenWrongInjectorException
        super().__init__(injector)


app_scope = ScopeDecorator(AppScope)
