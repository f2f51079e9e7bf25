"""Uniform sampling from convex bodies, exact volumes and inscribed balls of polytopes."""

__version__ = "0.1.0"