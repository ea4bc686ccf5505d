"""scripty: find a project's scripts directory and run scripts from it by name."""

__version__ = "0.3.0"

__all__ = [
    "cli",
    "config",
    "errors",
    "listing",
    "locator",
    "log",
    "paths",
    "resolver",
    "scripts",
]
