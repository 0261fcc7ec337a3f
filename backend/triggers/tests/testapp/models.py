from __future__ import annotations

from django.db import models


class Ticket(models.Model):
    title = models.CharField(max_length=200)
    status = models.CharField(max_length=32, default="open")
    is_deleted = models.BooleanField(default=False)

    class Meta:
        app_label = "triggers_testapp"

    def __str__(self) -> str:
        return self.title
