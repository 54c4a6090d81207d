"""EMPDEPT

LINQ-style query operations over the classic EMP, DEPT and SALGRADE tutorial
tables. Each SQL exercise is expressed as a composition of small, pure query
operators and checked against its expected outcome.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
