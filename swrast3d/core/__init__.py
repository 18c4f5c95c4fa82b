from swrast3d.core.timer import Timer

__all__ = ["Timer"]
