"""Style auto-discovery and registration.

Scans wallgen/styles/ for modules that define a `style` object of type
Style. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from wallgen.core.types import Style

_registry: dict[str, Style] = {}
_modules: dict[str, str] = {}


def discover() -> dict[str, Style]:
    """Import all style modules and return the registry."""
    if _registry:
        return _registry

    import wallgen.styles as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'wallgen.styles.{modname}')
        style = getattr(module, 'style', None)
        if isinstance(style, Style):
            _registry[style.name] = style
            _modules[style.name] = module.__name__

    return _registry


def get(name: str) -> Style:
    """Get a style by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unsupported style: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_styles() -> dict[str, Style]:
    """Return all registered styles."""
    return discover()


def style_module(name: str) -> object:
    """The module a style was registered from (for docstring access)."""
    get(name)
    return importlib.import_module(_modules[name])
