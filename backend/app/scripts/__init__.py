# Scripts package init
"""
Rodrise School Management Backend — Operational Scripts
========================================================

One-shot commands that run outside the request cycle, directly against the
database:

    - create_admin.py: ensure the default administrator account exists
      (`rodrise-create-admin` or `python -m app.scripts.create_admin`)
"""
