from shifolink.services.crud import CrudService

__all__ = ["CrudService"]
