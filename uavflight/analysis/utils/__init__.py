# uavflight/analysis/utils/__init__.py

from .coordinates import distance_km

__all__ = ['distance_km']
