from .custom_types._api import UTCDateTime
from .db import Base, BaseNoId, Db, metadata, reg
from .mixin import TzDatetimeMixin

__all__ = [
    'UTCDateTime',
    'Base',
    'BaseNoId',
    'Db',
    'metadata',
    'reg',
    'TzDatetimeMixin',
]
