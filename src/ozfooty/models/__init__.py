"""
Goal model for OzFooty.

- `poisson` evaluates the Poisson distribution and the scoreline grid.
- `modifiers` scales expected goals by form, injuries and tactics.
- `lambda_estimator` turns a base rate into a team's expected goals.
- `predictor` ties everything together into a match prediction.
"""
