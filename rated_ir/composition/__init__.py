"""Composition root for rated-ir."""
