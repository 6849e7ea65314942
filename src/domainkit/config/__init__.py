from .config import DomainKitConfig

__all__ = ["DomainKitConfig"]
