"""
Tests for the handler contract and base adapter.
"""

from django.test import SimpleTestCase

from triggers.handlers import HandlerContract, TriggerHandler


class TestTriggerHandler(SimpleTestCase):
    """Tests for TriggerHandler defaults."""

    def test_satisfies_contract(self):
        self.assertIsInstance(TriggerHandler(), HandlerContract)

    def test_default_operations_are_noops(self):
        handler = TriggerHandler()
        self.assertIsNone(handler.before_insert(["n"]))
        self.assertIsNone(handler.before_update(["o"], ["n"]))
        self.assertIsNone(handler.before_delete(["o"]))
        self.assertIsNone(handler.after_insert(["n"]))
        self.assertIsNone(handler.after_update(["o"], ["n"]))
        self.assertIsNone(handler.after_delete(["o"]))
        self.assertIsNone(handler.after_undelete(["n"]))

    def test_enabled_by_default(self):
        self.assertFalse(TriggerHandler().is_disabled())

    def test_disabled_flag(self):
        self.assertTrue(TriggerHandler(disabled=True).is_disabled())

    def test_disabled_predicate(self):
        calls = []

        def predicate():
            calls.append(1)
            return True

        handler = TriggerHandler(disabled=predicate)
        self.assertTrue(handler.is_disabled())
        self.assertTrue(handler.is_disabled())
        self.assertEqual(len(calls), 2)

    def test_handler_name_defaults_to_class_name(self):
        class TicketHandler(TriggerHandler):
            pass

        self.assertEqual(TicketHandler.handler_name(), "TicketHandler")

    def test_handler_name_uses_name_attribute(self):
        class TicketHandler(TriggerHandler):
            name = "tickets"

        self.assertEqual(TicketHandler.handler_name(), "tickets")

    def test_partial_override_keeps_other_noops(self):
        seen = []

        class InsertOnly(TriggerHandler):
            def before_insert(self, new_records):
                seen.extend(new_records)

        handler = InsertOnly()
        handler.before_insert(["a"])
        handler.after_delete(["b"])
        self.assertEqual(seen, ["a"])
