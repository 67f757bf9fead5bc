from shifolink.repositories.base import Repository

__all__ = ["Repository"]
