"""Classic data structures and algorithms: sorting, searching, linked lists, a queue, trees and graphs."""

__version__ = "0.1.0"