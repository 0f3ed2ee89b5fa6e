# Re-export some stuff from injector:
from injector import (
    Injector,
    InstanceProvider,
    Module,
    Provider,
    Scope,
    ScopeDecorator,
    SingletonScope,
    inject,
    provider,
)

from .scopes import (
    APP_INJECTOR_FLAG,
    AppScope,
    ScopeGivenWrongInjectorException,
    TeardownSingletonScope,
    app_scope,
)

__all__ = [
    'Injector',
    'InstanceProvider',
    'Module',
    'Provider',
    'Scope',
    'ScopeDecorator',
    'SingletonScope',
    'inject',
    'provider',
    'APP_INJECTOR_FLAG',
    'AppScope',
    'ScopeGivenWrongInjectorException',
    'TeardownSingletonScope',
    'app_scope',
]
