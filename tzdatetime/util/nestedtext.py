import datetime
import os
import typing as T
from pathlib import Path

import nestedtext as nt
from cattrs.converters import BaseConverter, Converter
from cattrs.strategies import configure_union_passthrough


def make_general_converter() -> BaseConverter:
    converter = Converter()

    # Handle booleans
    converter.register_structure_hook(
        bool,
        lambda v, _: v if isinstance(v, bool) else {'true': True, 'false': False}[
            v.lower()
        ],
    )
    converter.register_unstructure_hook(bool, lambda b: str(b).lower())

    # Handle datetimes, naive ones stay naive
    converter.register_structure_hook(
        datetime.datetime,
        lambda v, _: v
        if isinstance(v, datetime.datetime)
        else datetime.datetime.fromisoformat(v),
    )
    converter.register_unstructure_hook(
        datetime.datetime,
        lambda v: v.isoformat(),
    )

    # Allow unions
    configure_union_passthrough(
        str | bool | int | float | datetime.datetime | None,
        converter,
    )

    return converter


general_converter = make_general_converter()


def nt_loads(nestedtext: str) -> dict[str, T.Any]:
    """Load a NestedText document, an empty one gives an empty dict."""
    loaded = nt.loads(nestedtext)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise TypeError('NestedText document is not a dict')
    return loaded


def _drop_none(value: T.Any) -> T.Any:
    # NestedText has no null, absent keys fall back to defaults on load
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    return value


def sco_from_nt(nestedtext: str, config_cls: type, key: str | None = None):
    od = nt_loads(nestedtext)
    if key is not None:
        od = od.get(key) or {}
    return general_converter.structure(od, config_cls)


def sco_from_file(filepath: str | Path, config_cls: type, key: str | None = None):
    return sco_from_nt(Path(filepath).read_text(encoding='utf-8'), config_cls, key)


def config_to_nt(config: T.Any, key: str | None = None) -> str:
    config_dict = _drop_none(general_converter.unstructure_attrs_asdict(config))
    if key is not None:
        config_dict = {key: config_dict}
    return nt.dumps(config_dict, indent=2)


def config_to_file(config: T.Any, filepath: str | Path, key: str | None = None):
    text = config_to_nt(config, key)
    with open(os.path.abspath(filepath), 'w', encoding='utf-8') as file:
        file.write(text)
