"""Outer interfaces for pomotree."""
