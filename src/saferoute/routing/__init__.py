"""Routing — route template classification and segment substitution.

A route template is parsed once into an immutable ``RouteShape`` that
decides which parts of a URL may change afterwards.
"""
