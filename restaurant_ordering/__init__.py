"""
Restaurant ordering package

This package models a small restaurant ordering workflow built from six
classic design patterns.  Meals are created by a factory, customised by a
builder or enhancement layers, tracked by an observable order, paid for
through interchangeable payment strategies and sequenced by a facade.
The subpackages keep domain objects, construction rules, orchestration,
static data and console rendering apart.
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
