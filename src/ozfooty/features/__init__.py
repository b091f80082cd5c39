"""
Feature computation for OzFooty.

- `form` averages each team's goals for/against over its most recent matches.
"""
