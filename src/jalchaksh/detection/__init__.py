"""Synthetic threat detection: profiles, selection, geometry, scoring."""
