"""Upstream skills lookup and topic refinement."""
