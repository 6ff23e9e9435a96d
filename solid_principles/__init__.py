"""SOLID Principles - Root Package.

Paired "original" and "refactored" examples for the five SOLID design
principles, runnable individually or through the command line.

Key Components:
    - domain: Records and exceptions shared by the examples
    - principles: The SRP, OCP, LSP, ISP and DIP example pairs
    - registry: Lookup of examples by principle and variant
    - application: Running, capturing and comparing examples
    - config: Configuration schema and loading
    - cli: Command line interface

Usage:
    >>> solid-principles list
    >>> solid-principles run ocp original
    >>> solid-principles compare lsp
"""

from ._version import __version__

__author__ = "SOLID Principles Contributors"
