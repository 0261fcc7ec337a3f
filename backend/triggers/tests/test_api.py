from __future__ import annotations

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework.test import APIClient, APITestCase

from triggers.context import InvocationContext
from triggers.entrypoint import dispatch_to_registered
from triggers.handlers import TriggerHandler
from triggers.registry import _registrations, register
from triggers.stats import reset_trigger_stats


class TriggerHandlersApiTests(APITestCase):
    def setUp(self):
        User = get_user_model()
        self.admin = User.objects.create_superuser(username="admin", email="admin@example.com", password="pass")
        self.user = User.objects.create_user(username="user", email="user@example.com", password="pass")
        self.client = APIClient()

        self._saved = dict(_registrations)
        _registrations.clear()
        reset_trigger_stats()

        @register("triggers_testapp.ticket", name="ticket_audit", description="Audit tickets")
        class TicketAudit(TriggerHandler):
            pass

        @register("auth.user", name="user_sync", enabled=False)
        class UserSync(TriggerHandler):
            pass

    def tearDown(self):
        _registrations.clear()
        _registrations.update(self._saved)
        reset_trigger_stats()

    def test_list_requires_admin(self):
        url = reverse("trigger-handlers")

        response = self.client.get(url)
        self.assertIn(response.status_code, (401, 403))

        self.client.force_authenticate(self.user)
        response = self.client.get(url)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"]["status"], "forbidden")

    def test_list_returns_registrations_with_status(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("trigger-handlers"))

        self.assertEqual(response.status_code, 200)
        body = response.json()
        handlers = {h["name"]: h for h in body["data"]["handlers"]}
        self.assertEqual(set(handlers), {"ticket_audit", "user_sync"})
        self.assertTrue(handlers["ticket_audit"]["enabled"])
        self.assertEqual(handlers["ticket_audit"]["model"], "triggers_testapp.ticket")
        self.assertEqual(handlers["ticket_audit"]["description"], "Audit tickets")
        self.assertFalse(handlers["user_sync"]["enabled"])
        self.assertEqual(handlers["user_sync"]["disabled_reason"], "disabled")

    def test_list_filters_by_model(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("trigger-handlers"), {"model": "Auth.User"})

        names = [h["name"] for h in response.json()["data"]["handlers"]]
        self.assertEqual(names, ["user_sync"])

    def test_list_includes_stats(self):
        dispatch_to_registered("triggers_testapp.ticket", InvocationContext.after_insert(["a"]))

        self.client.force_authenticate(self.admin)
        body = self.client.get(reverse("trigger-handlers")).json()

        self.assertEqual(body["data"]["totals"]["dispatched"], 1)
        handlers = {h["name"]: h for h in body["data"]["handlers"]}
        self.assertEqual(handlers["ticket_audit"]["stats"]["dispatched"], 1)
        self.assertEqual(handlers["ticket_audit"]["stats"]["last_event"], "after_insert")

    def test_detail(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("trigger-handler-detail", kwargs={"name": "ticket_audit"}))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["name"], "ticket_audit")

    def test_detail_unknown_returns_404_envelope(self):
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("trigger-handler-detail", kwargs={"name": "missing"}))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"]["status"], "not_found")
