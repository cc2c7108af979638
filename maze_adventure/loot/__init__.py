from .generator import brew_potion, forge_weapon  # noqa: F401

__all__ = ["brew_potion", "forge_weapon"]
