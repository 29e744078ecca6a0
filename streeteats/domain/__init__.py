"""Domain package: all ORM models are imported here so create_all registers them.

Folder intent:
  account.py    - Vendor / Supplier accounts and the Role enum
  grievance.py  - Grievances and their inline base64 attachments
  catalog.py    - Supplier menu items and the append-only vendor cart
  mixins.py     - Shared UUID primary key and TimestampMixin
"""

from streeteats.domain.account import Role, Supplier, Vendor
from streeteats.domain.catalog import CartEntry, MenuItem
from streeteats.domain.grievance import Grievance, GrievanceAttachment

__all__ = [
    "CartEntry",
    "Grievance",
    "GrievanceAttachment",
    "MenuItem",
    "Role",
    "Supplier",
    "Vendor",
]
