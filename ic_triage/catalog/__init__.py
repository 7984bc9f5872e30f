"""Clinical instrument catalog.

Instrument content is loaded from versioned YAML under ``data/``; scoring
strategies and administration rules are paired with it in
``ic_triage.catalog.registry``.
"""
