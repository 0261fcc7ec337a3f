from __future__ import annotations

from django.dispatch import Signal

# Sent after the application restores previously deleted records.
# Django has no native undelete; soft-delete code sends this explicitly.
# Args: instances (list[Model]), using (str)
post_undelete = Signal()
