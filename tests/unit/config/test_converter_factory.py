"""Unit tests for config.converter_factory module."""

from xml_to_elements.config.converter_factory import build_converter, build_converters
from xml_to_elements.config.models import ConversionConfig, TagMapping
from xml_to_elements.converter.models import ElementDescriptor
from xml_to_elements.converter.xml_to_elements import XMLToElements


class TestBuildConverter:
    """Test cases for build_converter()."""

    def test_all_attributes_passed_through(self):
        """Default mode copies every attribute into props."""
        convert = build_converter(TagMapping(tag="p", type="Paragraph"))

        assert convert({"class": "lead", "id": "p1"}, None) == {
            "type": "Paragraph",
            "props": {"class": "lead", "id": "p1"},
        }

    def test_no_attributes(self):
        """'none' mode ignores attributes."""
        convert = build_converter(TagMapping(tag="p", type="Paragraph", attributes="none"))

        assert convert({"class": "lead"}, None)["props"] == {}

    def test_renamed_attributes(self):
        """Mapping mode renames selected attributes and drops the rest."""
        mapping = TagMapping(tag="a", type="Link", attributes={"href": "to", "title": "title"})
        convert = build_converter(mapping)

        assert convert({"href": "/home", "target": "_blank"}, None)["props"] == {"to": "/home"}

    def test_static_props_merged_under_attributes(self):
        """Attribute values override static props of the same name."""
        mapping = TagMapping(tag="a", type="Link", props={"className": "link", "rel": "none"})
        convert = build_converter(mapping)

        assert convert({"rel": "noopener"}, None)["props"] == {"className": "link", "rel": "noopener"}

    def test_static_props_copied_per_call(self):
        """Returned props are independent between calls."""
        convert = build_converter(TagMapping(tag="p", type="P", props={"x": 1}))

        first = convert({}, None)
        first["props"]["x"] = 2

        assert convert({}, None)["props"] == {"x": 1}

    def test_key_attribute_sets_key(self):
        """key_attribute value becomes the key prop when present."""
        convert = build_converter(TagMapping(tag="li", type="Item", key_attribute="id"))

        assert convert({"id": "item-1"}, None)["props"]["key"] == "item-1"
        assert "key" not in convert({}, None)["props"]

    def test_converter_name(self):
        """Converter functions are named after their tag."""
        convert = build_converter(TagMapping(tag="svg:rect", type="Rect"))

        assert convert.__name__ == "convert_svg_rect"


class TestBuildConverters:
    """Test cases for build_converters()."""

    def test_builds_one_converter_per_tag(self):
        """Every mapping gets a converter."""
        config = ConversionConfig(mappings={
            "p": TagMapping(tag="p", type="Paragraph"),
            "em": TagMapping(tag="em", type="Emphasis"),
        })

        converters = build_converters(config)

        assert set(converters) == {"p", "em"}
        assert all(callable(converter) for converter in converters.values())

    def test_converters_work_with_xml_to_elements(self):
        """Built converters plug straight into XMLToElements."""
        config = ConversionConfig(mappings={
            "ul": TagMapping(tag="ul", type="List", attributes="none"),
            "li": TagMapping(tag="li", type="Item", key_attribute="id"),
        })
        xml_to_elements = XMLToElements(build_converters(config))

        result = xml_to_elements.convert('<ul class="x"><li id="a">A</li><li>B</li></ul>')

        assert result == ElementDescriptor("List", {"key": 0}, [
            ElementDescriptor("Item", {"key": "a", "id": "a"}, ["A"]),
            ElementDescriptor("Item", {"key": 1}, ["B"]),
        ])
