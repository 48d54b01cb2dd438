"""
Frame formula engine.

Pure Python math. Given a shape selector, dimensions, collar type and flags,
produce the named aluminium section lengths (inches) and glazed area.
"""
