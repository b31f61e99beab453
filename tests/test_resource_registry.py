import unittest

from sonarqube_provider import webhook
from sonarqube_provider.resources import RESOURCES, get_resource
from sonarqube_provider.schema import WEBHOOK_FIELDS, requires_replacement
from sonarqube_provider.types import WebhookSpec, WebhookState


class TestResourceRegistry(unittest.TestCase):
    def test_webhook_resource_is_registered_with_its_hooks(self) -> None:
        res = get_resource("sonarqube_webhook")
        self.assertIs(RESOURCES["sonarqube_webhook"], res)
        self.assertIs(webhook.create, res.create)
        self.assertIs(webhook.read, res.read)
        self.assertIs(webhook.update, res.update)
        self.assertIs(webhook.delete, res.delete)
        self.assertIs(webhook.import_state, res.importer)

    def test_unknown_resource(self) -> None:
        with self.assertRaises(KeyError):
            get_resource("sonarqube_project")

    def test_webhook_schema_flags(self) -> None:
        res = get_resource("sonarqube_webhook")
        self.assertEqual(["key", "project", "name", "url", "secret"], [f.name for f in res.schema])

        key = res.field("key")
        self.assertTrue(key.computed and key.optional)
        self.assertTrue(res.field("project").force_new)
        self.assertTrue(res.field("name").required)
        self.assertTrue(res.field("url").required)
        self.assertTrue(res.field("secret").optional)
        self.assertTrue(res.field("secret").sensitive)
        with self.assertRaises(KeyError):
            res.field("nope")

        # Only project forces replacement.
        self.assertEqual(["project"], [n for n, f in WEBHOOK_FIELDS.items() if f.force_new])


class TestRequiresReplacement(unittest.TestCase):
    def test_project_change_requires_replacement(self) -> None:
        state = WebhookState(id="k", project="a", name="n", url="https://u")
        self.assertEqual(["project"], requires_replacement(state, WebhookSpec(name="n", url="https://u", project="b")))
        self.assertEqual(["project"], requires_replacement(state, WebhookSpec(name="n", url="https://u")))

    def test_in_place_changes(self) -> None:
        state = WebhookState(id="k", project="a", name="n", url="https://u", secret="s")
        spec = WebhookSpec(name="other", url="https://v", project="a", secret="t")
        self.assertEqual([], requires_replacement(state, spec))

    def test_empty_project_equals_unset(self) -> None:
        state = WebhookState(id="k", project="")
        self.assertEqual([], requires_replacement(state, WebhookSpec(name="n", url="https://u", project=None)))


if __name__ == "__main__":
    unittest.main()
