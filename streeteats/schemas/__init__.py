"""Pydantic schemas package.

Folder intent:
  common.py     - CamelModel base, MessageResponse, HealthResponse
  account.py    - registration, login, shop status and admin listings
  grievance.py  - grievance submission and read models
  catalog.py    - menu items and vendor cart entries
"""
