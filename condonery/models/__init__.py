"""
Domain models — entities, directories and the portfolio.
"""
from .entity import Entity, EntityKind
from .property import Property
from .client import Client
from .directory import Directory, show_all
from .portfolio import Portfolio

__all__ = [
    'Entity',
    'EntityKind',
    'Property',
    'Client',
    'Directory',
    'show_all',
    'Portfolio',
]
