"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, SQL fragment builders, domain errors). Keep entity-specific SQL
in the corresponding feature package (e.g. `companies/`).
"""
