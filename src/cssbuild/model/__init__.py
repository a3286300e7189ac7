from cssbuild.model.category import PartCategory

__all__ = ["PartCategory"]
