"""Entrypoints (inbound adapters) for EMPDEPT.

Expose the scenarios to the outside world through the command line. Parse and
validate inputs, call the service layer, and present results.

Dependency rule: may import `empdept.service_layer`; the fixture store is
wired in by `empdept.bootstrap`.
"""
