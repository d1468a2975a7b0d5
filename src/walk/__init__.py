"""Breadth-first walk engine with pluggable Visitor/Generator capabilities."""

from .model import CONTINUE, Break, Continue, Generator, Item, Next, Visitor, VisitDecision
from .engine import walk
from .adapters import DistanceVisitor, FunctionGenerator, FunctionVisitor, successors_of

__all__ = [
    "CONTINUE",
    "Break",
    "Continue",
    "Next",
    "Item",
    "Generator",
    "Visitor",
    "VisitDecision",
    "walk",
    "DistanceVisitor",
    "FunctionGenerator",
    "FunctionVisitor",
    "successors_of",
]
