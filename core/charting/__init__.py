"""Presentation helpers for the probability chart.

The chart engine (`chartengine`) produces plot geometry; this package turns
that geometry into the artifacts served by the views: SVG markup and a JSON
payload. It also wires Django-side inputs (Market rows, view-state forms) into
the engine.
"""
