# -------------------------------------
# explode: brace expansion
# -------------------------------------
"""
Brace expansion of expressions like "s{{a,o}{il,lv},l{ee,o}p}ing".

Imports are lazy to avoid RuntimeWarning when running submodules as scripts.
Use: from explode import expand, ExplodeError, etc.
"""

__all__ = [
    # expander
    "expand",
    "explode",
    "expand_recover",
    "count",
    "combine",
    "Context",
    # scanner
    "iter_tokens",
    "scan_tokens",
    "escape",
    "unescape",
    "Lit",
    "Open",
    "Close",
    "Sep",
    # errors
    "ExplodeError",
    # state
    "set_limit",
    "get_limit",
]

# Lazy import mapping: attribute -> (module, name)
_LAZY_IMPORTS = {
    "expand": (".expander", "expand"),
    "explode": (".expander", "explode"),
    "expand_recover": (".expander", "expand_recover"),
    "count": (".expander", "count"),
    "combine": (".expander", "combine"),
    "Context": (".expander", "Context"),
    "iter_tokens": (".scanner", "iter_tokens"),
    "scan_tokens": (".scanner", "scan_tokens"),
    "escape": (".scanner", "escape"),
    "unescape": (".scanner", "unescape"),
    "Lit": (".scanner", "Lit"),
    "Open": (".scanner", "Open"),
    "Close": (".scanner", "Close"),
    "Sep": (".scanner", "Sep"),
    "ExplodeError": (".errors", "ExplodeError"),
    "set_limit": (".explode_state", "set_limit"),
    "get_limit": (".explode_state", "get_limit"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_name, __package__)
        return getattr(module, attr_name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
