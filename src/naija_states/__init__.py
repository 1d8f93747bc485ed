"""
Nigerian states with their senatorial districts and local government areas.

    >>> import naija_states
    >>> naija_states.states()[36]
    'Zamfara'
    >>> naija_states.senatorial_districts("oyo")
    ('Oyo Central', 'Oyo North', 'Oyo South')
    >>> naija_states.lgas("abuja").name
    'Federal Capital Territory'
"""

from .errors import InvalidInput, NaijaStatesError, StateNotFound
from .models import StateRecord
from .normalize import FCT_ALIASES, FCT_NAME, normalize, resolve_alias
from .registry import (
    Registry,
    all_states,
    default_registry,
    districts_of,
    find_state,
    lgas,
    load_registry,
    record_of,
    senatorial_districts,
    states,
)
from .settings import RegistrySettings, configure_logging, get_settings

# Module attribute only; left out of __all__ so star-imports keep the builtin
all = all_states

__all__ = [
    "all_states",
    "states",
    "senatorial_districts",
    "districts_of",
    "lgas",
    "record_of",
    "find_state",
    "normalize",
    "resolve_alias",
    "FCT_ALIASES",
    "FCT_NAME",
    "Registry",
    "StateRecord",
    "default_registry",
    "load_registry",
    "NaijaStatesError",
    "InvalidInput",
    "StateNotFound",
    "RegistrySettings",
    "get_settings",
    "configure_logging",
]
