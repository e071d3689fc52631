"""Shared numeric constants used across the inflix package."""

g_small = 1e-12       #: Small epsilon value for numerical checks
