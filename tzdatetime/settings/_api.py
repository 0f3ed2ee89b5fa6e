from .tzdatetime import (
    TIME_ZONE_DATABASES,
    TzDatetimeSettings,
    load_settings,
    save_settings,
    settings_from_nt,
    settings_to_nt,
)

__all__ = [
    'TIME_ZONE_DATABASES',
    'TzDatetimeSettings',
    'load_settings',
    'save_settings',
    'settings_from_nt',
    'settings_to_nt',
]
