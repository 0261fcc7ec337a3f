"""Tests for trigger configuration."""

from django.test import SimpleTestCase, override_settings

from triggers.config import (
    TriggerConfig,
    get_trigger_config,
    is_handler_disabled,
    normalize_trigger_config,
)


class TestNormalizeTriggerConfig(SimpleTestCase):
    """Tests for normalize_trigger_config function."""

    def test_empty_input_returns_defaults(self):
        """None input returns default config."""
        config = normalize_trigger_config(None)
        self.assertTrue(config.enabled)
        self.assertEqual(config.disabled_handlers, frozenset())

    def test_valid_config(self):
        config = normalize_trigger_config({"enabled": False, "disabled_handlers": ["a", "b"]})
        self.assertFalse(config.enabled)
        self.assertEqual(config.disabled_handlers, frozenset({"a", "b"}))

    def test_non_bool_enabled_falls_back_to_default(self):
        config = normalize_trigger_config({"enabled": "no"})
        self.assertTrue(config.enabled)

    def test_single_string_handler(self):
        config = normalize_trigger_config({"disabled_handlers": "TicketHandler"})
        self.assertEqual(config.disabled_handlers, frozenset({"TicketHandler"}))

    def test_invalid_handler_entries_are_dropped(self):
        config = normalize_trigger_config({"disabled_handlers": ["ok", "", "  ", 3, None]})
        self.assertEqual(config.disabled_handlers, frozenset({"ok"}))

    def test_invalid_handler_container_ignored(self):
        config = normalize_trigger_config({"disabled_handlers": 42})
        self.assertEqual(config.disabled_handlers, frozenset())

    def test_config_is_frozen(self):
        self.assertEqual(TriggerConfig(), TriggerConfig(enabled=True, disabled_handlers=frozenset()))


class TestSettingsLookup(SimpleTestCase):
    @override_settings(TRIGGERS={"enabled": True, "disabled_handlers": ["Quiet"]})
    def test_reads_settings(self):
        config = get_trigger_config()
        self.assertTrue(config.enabled)
        self.assertIn("Quiet", config.disabled_handlers)

    @override_settings(TRIGGERS={"enabled": True, "disabled_handlers": ["Quiet"]})
    def test_named_handler_disabled(self):
        self.assertTrue(is_handler_disabled("Quiet"))
        self.assertFalse(is_handler_disabled("Loud"))

    @override_settings(TRIGGERS={"enabled": False})
    def test_global_switch_disables_everything(self):
        self.assertTrue(is_handler_disabled("Loud"))
