"""
Data layer for OzFooty.

Includes:
- Record types, schema validation and id normalisation (`schema`)
- Loading utilities with explicit success/failure results (`data_loader`)
"""
