"""
Global constants used throughout the project
"""

# Bounded search demonstration
SEARCH_SEQUENCE = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
SEARCH_TARGET = 8

# Propagation demonstration: name -> (initial value, referenced names)
NODE_VALUES = {
    "a": (1, ()),
    "b": (2, ("a",)),
    "c": (3, ("a",)),
}
PROPAGATION_ORDER = ("a", "b", "c")
PROPAGATION_DELTA = 2

DEBUG = False
