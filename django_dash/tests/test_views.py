from unittest import mock

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from django_dash.blocks import DashBlock
from django_dash.models import BlockInstance

from .test_users import create_users

User = get_user_model()


class BlockViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        create_users()
        cls.instance = BlockInstance.objects.create(title="People", data_source="users")

    def setUp(self):
        self.client.force_login(User.objects.get(username="alice"))

    def test_login_required(self):
        self.client.logout()
        response = self.client.get(reverse("django_dash:block", args=[self.instance.pk]))
        self.assertEqual(response.status_code, 302)

    def test_renders_grid(self):
        response = self.client.get(reverse("django_dash:block", args=[self.instance.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "People")
        self.assertContains(response, "bob@example.com")
        self.assertNotContains(response, "carol")
        self.assertContains(response, 'name="dash__%s__filters.username"' % self.instance.pk)

    def test_pagination_links_keep_filters(self):
        for username in ("bobby", "bobo"):
            User.objects.create_user(username, f"{username}@example.com", "pw")
        self.instance.preferences = {"per_page": 1}
        self.instance.save()
        pk = self.instance.pk
        url = reverse("django_dash:block", args=[pk])

        response = self.client.get(url, {f"dash__{pk}__filters.username": "bob"})
        self.assertContains(response, "1 / 3")
        self.assertContains(response, f'href="?dash__{pk}__filters.username=bob&amp;dash__{pk}__page=2"')

        response = self.client.get(url, {f"dash__{pk}__filters.username": "bob", f"dash__{pk}__page": "2"})
        self.assertContains(response, "2 / 3")
        self.assertContains(response, "bobby@example.com")
        self.assertContains(response, f'href="?dash__{pk}__filters.username=bob&amp;dash__{pk}__page=1"')
        self.assertContains(response, f'href="?dash__{pk}__filters.username=bob&amp;dash__{pk}__page=3"')

    def test_missing_block(self):
        response = self.client.get(reverse("django_dash:block", args=[9999]))
        self.assertEqual(response.status_code, 404)

    def test_not_configured(self):
        instance = BlockInstance.objects.create(title="Empty")
        response = self.client.get(reverse("django_dash:block", args=[instance.pk]))
        self.assertContains(response, "This block is not configured yet.")

    def test_one_stat(self):
        self.instance.preferences = {"layout": "one_stat", "stat_field": "email"}
        self.instance.save()
        response = self.client.get(reverse("django_dash:block", args=[self.instance.pk]))
        self.assertContains(response, "alice@example.com")
        self.assertNotContains(response, "bob@example.com")


class PreferencesViewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        create_users()
        cls.instance = BlockInstance.objects.create(title="People", data_source="users")

    def setUp(self):
        self.client.force_login(User.objects.get(username="alice"))
        self.url = reverse("django_dash:preferences", args=[self.instance.pk])

    def test_get(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'name="available_fields__email__visible"')
        self.assertContains(response, 'name="filters__activeonly__enabled"')

    def test_post_saves_preferences(self):
        response = self.client.post(
            self.url,
            {
                "layout": "grid",
                "per_page": "10",
                "available_fields__username__visible": "on",
                "available_fields__username__sortorder": "0",
                "filters__username__enabled": "on",
            },
        )
        self.assertRedirects(response, reverse("django_dash:block", args=[self.instance.pk]))

        self.instance.refresh_from_db()
        preferences = self.instance.preferences
        self.assertEqual(preferences["layout"], "grid")
        self.assertEqual(list(preferences["available_fields"])[0], "username")
        self.assertFalse(preferences["available_fields"]["email"]["visible"])
        self.assertFalse(preferences["filters"]["activeonly"]["enabled"])

        html = DashBlock(self.instance).render(self.client.get(self.url).wsgi_request)
        self.assertIn("carol", html)
        self.assertNotIn("alice@example.com", html)

    def test_invalid_post_redisplays_form(self):
        response = self.client.post(self.url, {"layout": "carousel"})
        self.assertEqual(response.status_code, 200)
        self.instance.refresh_from_db()
        self.assertEqual(self.instance.preferences, {})

    def test_not_configured_redirects(self):
        instance = BlockInstance.objects.create(title="Empty")
        response = self.client.get(reverse("django_dash:preferences", args=[instance.pk]))
        self.assertRedirects(response, reverse("django_dash:block", args=[instance.pk]))

    def test_messages_are_translated(self):
        instance = BlockInstance.objects.create(title="Empty")
        with mock.patch("django_dash.views._", side_effect=lambda message: f"[{message}]"):
            response = self.client.get(reverse("django_dash:preferences", args=[instance.pk]))
        self.assertEqual(
            [str(m) for m in get_messages(response.wsgi_request)],
            ["[Choose a data source before editing preferences.]"],
        )
