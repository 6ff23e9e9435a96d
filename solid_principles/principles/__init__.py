"""Paired "original" and "refactored" examples for each SOLID principle.

Each subpackage holds two standalone modules exposing a ``main()`` entry
point. The refactored module changes how a capability is named or
abstracted; it never changes what the original prints, except where the
refactoring exists to add a new variant (OCP, LSP).
"""

PRINCIPLES = ("srp", "ocp", "lsp", "isp", "dip")
VARIANTS = ("original", "refactored")
