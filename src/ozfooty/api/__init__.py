"""
FastAPI prediction service for OzFooty.

Exposes endpoints to:
- List the supported leagues.
- Predict the outcome of a fixture between two teams.
"""
