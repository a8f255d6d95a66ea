"""Noise Map Bounded Context.

Responsible for sampling noise modules into 2D rasters:
- Value Objects: CylinderBounds, FilterLevel
- Entities: NoiseMap
- Models: CylinderModel
- Filters: MaskFilter
- Services: NoiseMapBuilderCylinder
"""
