"""wpscaffold - keep a WordPress project's composer.json configured."""

__version__ = "1.0.0"
