"""Hosting control panel authentication pipeline.

Layers:
- core: settings, result types, errors, dependency container
- domain: entities, enums, events, protocols (ports)
- application: authentication pipeline (registry, service, listeners)
- infrastructure: adapters (logging, persistence, sessions, daemon, events)
"""

__version__ = "1.0.0"
