from datetime import datetime

from django.test import SimpleTestCase, override_settings

from django_dash.data_grid.field import FieldDefinition, UserProfileLinkFieldDefinition
from django_dash.data_grid.field.attribute import (
    BoolAttribute,
    DateAttribute,
    IdentifierAttribute,
    ImageAttribute,
    LinkAttribute,
    PercentAttribute,
)
from django_dash.exceptions import DashConfigurationError


class FieldDefinitionTests(SimpleTestCase):
    def test_defaults(self):
        definition = FieldDefinition("first_name", "u.first_name")
        self.assertEqual(definition.get_title(), "First Name")
        self.assertEqual(definition.get_visibility(), FieldDefinition.VISIBILITY_VISIBLE)
        self.assertEqual(definition.transform_data("Ann", {}), "Ann")

    def test_set_visibility_coerces_values(self):
        definition = FieldDefinition("email", "u.email")
        definition.set_visibility(0)
        self.assertEqual(definition.get_visibility(), FieldDefinition.VISIBILITY_HIDDEN)
        definition.set_visibility("1")
        self.assertTrue(definition.is_visible())
        definition.set_visibility("0")
        self.assertFalse(definition.is_visible())
        definition.set_visibility(True)
        self.assertEqual(definition.get_visibility(), FieldDefinition.VISIBILITY_VISIBLE)

    def test_attributes_are_chained_in_order(self):
        definition = FieldDefinition(
            "score", "s.score", attributes=[PercentAttribute(fraction=True), LinkAttribute("/scores/{id}/")]
        )
        self.assertTrue(definition.has_attribute(PercentAttribute))
        self.assertFalse(definition.has_attribute(DateAttribute))
        self.assertEqual(
            definition.transform_data(0.5, {"id": 4}),
            '<a href="/scores/4/">50%</a>',
        )

    def test_remove_attribute(self):
        attribute = BoolAttribute()
        definition = FieldDefinition("flag", "t.flag", attributes=[attribute])
        definition.remove_attribute(attribute)
        definition.remove_attribute(attribute)
        self.assertEqual(definition.get_attributes(), [])
        self.assertEqual(definition.transform_data(1, {}), 1)

    def test_add_attribute_rejects_other_types(self):
        with self.assertRaises(TypeError):
            FieldDefinition("x", "t.x").add_attribute(object())

    def test_options(self):
        definition = FieldDefinition("x", "t.x", options={"sortable": True})
        definition.set_option("width", 20)
        definition.set_options({"sortable": False})
        self.assertEqual(definition.get_options(), {"sortable": False, "width": 20})
        self.assertIsNone(definition.get_option("missing"))

    def test_transform_does_not_mutate_record(self):
        record = {"id": 9, "name": "Ann"}
        definition = FieldDefinition("id", "t.id", attributes=[IdentifierAttribute(), LinkAttribute("/u/{name}/")])
        definition.transform_data(9, record)
        self.assertEqual(record, {"id": 9, "name": "Ann"})


class UserProfileLinkFieldDefinitionTests(SimpleTestCase):
    def setUp(self):
        self.definition = UserProfileLinkFieldDefinition("profile", "u.id")

    def test_empty_values_map_to_empty_string(self):
        for value in (None, 0, ""):
            self.assertEqual(self.definition.transform_data(value, {}), "")

    def test_link_encodes_user_id(self):
        self.assertHTMLEqual(
            self.definition.transform_data(42, {"id": 42}),
            '<a href="/user/profile/?id=42">View profile</a>',
        )

    @override_settings(DASH_USER_PROFILE_URL="/people/")
    def test_profile_url_is_configurable(self):
        self.assertIn('href="/people/?id=7"', self.definition.transform_data(7, {}))


@override_settings(USE_TZ=True, TIME_ZONE="UTC")
class AttributeTests(SimpleTestCase):
    def test_date_attribute(self):
        attribute = DateAttribute("Y-m-d")
        self.assertEqual(attribute.transform_data(0, {}), "1970-01-01")
        self.assertEqual(attribute.transform_data("86400", {}), "1970-01-02")
        self.assertEqual(attribute.transform_data(datetime(2024, 3, 5, 10, 0), {}), "2024-03-05")
        self.assertEqual(attribute.transform_data("2024-03-05 10:00:00", {}), "2024-03-05")
        self.assertEqual(attribute.transform_data(None, {}), FieldDefinition.DEFAULT_EMPTY_VALUE)

    def test_bool_attribute(self):
        attribute = BoolAttribute()
        self.assertEqual(str(attribute.transform_data(1, {})), "Yes")
        self.assertEqual(str(attribute.transform_data("0", {})), "No")
        self.assertEqual(str(attribute.transform_data(None, {})), "No")

    def test_percent_attribute(self):
        self.assertEqual(PercentAttribute(precision=1, fraction=True).transform_data(0.256, {}), "25.6%")
        self.assertEqual(PercentAttribute().transform_data("75", {}), "75%")
        self.assertEqual(PercentAttribute().transform_data("n/a", {}), "-")

    def test_link_attribute(self):
        attribute = LinkAttribute("/course/{course_id}/?user={value}", label="Open")
        self.assertEqual(
            attribute.transform_data(7, {"course_id": 3}),
            '<a href="/course/3/?user=7">Open</a>',
        )
        self.assertEqual(attribute.transform_data(None, {}), "-")

    def test_link_attribute_maps_falsy_values_to_empty(self):
        attribute = LinkAttribute("/x/{value}")
        for value in (0, "", None, False):
            self.assertEqual(attribute.transform_data(value, {}), "-")

    def test_link_attribute_missing_record_keys_render_empty(self):
        attribute = LinkAttribute("/u/{user_id}/{value}")
        self.assertEqual(attribute.transform_data(5, {}), '<a href="/u//5">5</a>')

    def test_link_attribute_rejects_unnamed_placeholders(self):
        for page_url in ("/x/{0}", "/x/{}", "/x/{user.id}", "/x/{ids[0]}", "/x/{value"):
            with self.subTest(page_url=page_url):
                with self.assertRaises(DashConfigurationError):
                    LinkAttribute(page_url)
        attribute = LinkAttribute("/x/{value}")
        with self.assertRaises(DashConfigurationError):
            attribute.set_option("page_url", "/x/{0}")

    def test_link_attribute_escapes_label(self):
        self.assertIn("&lt;b&gt;", LinkAttribute("/x/").transform_data("<b>", {}))

    def test_image_attribute_uses_field_title(self):
        definition = FieldDefinition("avatar", "u.avatar", "Avatar", attributes=[ImageAttribute()])
        self.assertHTMLEqual(
            definition.transform_data("/media/a.png", {}),
            '<img src="/media/a.png" alt="Avatar" class="img-fluid">',
        )
        self.assertEqual(definition.transform_data("", {}), "-")
