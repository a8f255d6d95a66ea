"""Noise Bounded Context.

Responsible for the scalar fields that builders sample:
- Ports: NoiseModule
- Modules: Const, Checkerboard, Cylinders, Spheres, ScaleBias
"""
