"""Routers package: HTTP endpoint definitions, all mounted under /api.

Files:
  accounts.py    - registration, login, supplier shop status
  admin.py       - pending list, verify, reject, all users
  grievances.py  - grievance submission, listing, attachment download
  catalog.py     - supplier menus and vendor cart

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to streeteats/services/.
"""
