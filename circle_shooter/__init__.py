"""Circle Shooter - defend the center against incoming circles"""

__version__ = "1.0.0"
