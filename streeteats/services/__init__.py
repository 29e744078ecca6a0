"""Services package: all business logic lives here, never in routers.

Files:
  attachments.py   - attachment codec: staging, base64 encode/decode, cleanup
  verification.py  - pending list, approve, reject
  grievance.py     - grievance ledger: submit, filtered listing, downloads
  account.py       - registration, login, supplier shop status
  catalog.py       - supplier menus and vendor cart

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
