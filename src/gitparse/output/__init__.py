"""Reporters for parsed git output."""
