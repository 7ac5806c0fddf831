"""Strategy auto-discovery and registration.

Scans palindrome_filter/strategies/ for modules that define a `strategy`
object of type Strategy. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from palindrome_filter.core.types import Strategy

_registry: dict[str, Strategy] = {}


def discover() -> dict[str, Strategy]:
    """Import all strategy modules and return the registry."""
    if _registry:
        return _registry

    import palindrome_filter.strategies as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'palindrome_filter.strategies.{modname}')
        strat = getattr(module, 'strategy', None)
        if isinstance(strat, Strategy):
            _registry[strat.name] = strat

    return _registry


def get(name: str) -> Strategy:
    """Get a strategy by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown strategy: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_strategies() -> dict[str, Strategy]:
    """Return all registered strategies."""
    return discover()
