"""Bootstrap (composition root) for EMPDEPT.

Assembles the application at runtime: wires the concrete fixture store into
the scenario runner.

Import rules:
- Entry points import *this* package for wiring.
- This package may import: `empdept.adapters`, `empdept.service_layer`,
  `empdept.interfaces` and `empdept.domain`.
- Inner layers must not import `empdept.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
