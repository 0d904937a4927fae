"""
Provisioning scripts for the BananaEditor deployment.

One-off, operator-driven flows that generate secrets, write the
front-end environment file and configure/deploy the Firebase functions.
Run through `python -m provisioning.cli`.
"""
