"""List apps, services and containers of a targeted Cloud Foundry space, with a small plugin toolkit."""

__version__ = "0.0.1"

__all__ = [
    "api",
    "cli",
    "commands",
    "examples",
    "fakes",
    "i18n",
    "matchers",
    "models",
    "plugin",
    "resources",
    "ui",
]