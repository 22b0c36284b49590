"""Top-level package for the Roads Budget Plan console.

The package records cities, the roads between them and a budget per
road, and keeps two plain text snapshots (cities.txt, roads.txt) in
sync after every change.

Layers:
- roadplan.domain: immutable models and typed errors
- roadplan.graph: the in-memory road network store
- roadplan.ports / roadplan.adapters: export and rendering seams
- roadplan.services: write-through orchestration
- roadplan.io: the interactive console
"""
