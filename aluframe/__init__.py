"""Aluminium window/door frame estimator."""
