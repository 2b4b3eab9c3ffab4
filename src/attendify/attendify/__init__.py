"""Attendify package.

Per-subject class attendance tracking with derived analytics. The package is
organized by feature modules (subjects, analytics, heatmap, trends, ...) with
a thin Flask controller layer over service/repository layers.
"""
