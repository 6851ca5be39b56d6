"""Wallpaper styles.

Every .py file in this package that defines a `style` object is
auto-registered by wallgen.registry.discover().
"""
