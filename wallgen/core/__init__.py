"""wallgen.core — Foundation layer.

Contains the colour codec, shape types, hit-testing, the compositor, the
PNG sink and the render report.
This module has NO dependencies on wallgen.styles or wallgen.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
