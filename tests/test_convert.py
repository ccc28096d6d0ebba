"""Tests for converting emoji-data exports.

Run with: pytest tests/test_convert.py -v
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bk_emoji.catalogue import parse_catalogue
from bk_emoji.convert import convert, convert_descriptor, to_json
from bk_emoji.errors import ParseError


def descriptor(short_name, **kwargs):
    entry = {
        "short_name": short_name,
        "short_names": [short_name],
        "image": f"{short_name}.png",
        "unified": "1F600",
        "category": "People",
        "has_img_apple": True,
    }
    entry.update(kwargs)
    return entry


class TestConvertDescriptor:
    def test_aliases_drop_primary_name(self):
        record = convert_descriptor(descriptor("cat", short_names=["cat", "kitty"]))
        assert record.aliases == ("kitty",)

    def test_primary_name_not_listed(self):
        record = convert_descriptor(descriptor("cat", short_names=["kitty"]))
        assert record.aliases == ("kitty",)

    def test_image_prefix(self):
        record = convert_descriptor(descriptor("cat", image="1f431.png", unified="1F431"))
        assert record.image == "img-apple-64/1f431.png"
        assert record.unicode == "1F431"

    def test_uncategorised_flag(self):
        record = convert_descriptor(descriptor("flag-nz", category=None))
        assert record.category == "Flags"

    def test_flag_keeps_its_category(self):
        record = convert_descriptor(descriptor("flag-nz", category="Symbols"))
        assert record.category == "Symbols"

    def test_uncategorised_passes_through(self):
        entry = descriptor("mystery")
        del entry["category"]
        assert convert_descriptor(entry).category is None

    def test_skin_tones_numbered_from_two(self):
        record = convert_descriptor(descriptor("wave", skin_variations={
            "1F3FB": {"unified": "1F44B-1F3FB", "image": "1f44b-1f3fb.png"},
            "1F3FC": {"unified": "1F44B-1F3FC", "image": "1f44b-1f3fc.png"},
        }))
        assert [m.name for m in record.modifiers] == ["skin-tone-2", "skin-tone-3"]
        assert record.modifiers[0].image == "img-apple-64/1f44b-1f3fb.png"
        assert record.modifiers[1].unicode == "1F44B-1F3FC"

    def test_skin_tones_follow_document_order(self):
        record = convert_descriptor(descriptor("wave", skin_variations={
            "1F3FC": {"unified": "B", "image": "b.png"},
            "1F3FB": {"unified": "A", "image": "a.png"},
        }))
        assert [m.unicode for m in record.modifiers] == ["B", "A"]

    def test_no_skin_tones(self):
        assert convert_descriptor(descriptor("cat", skin_variations={})).modifiers == ()
        assert convert_descriptor(descriptor("cat")).modifiers == ()

    def test_missing_field(self):
        entry = descriptor("cat")
        del entry["unified"]
        with pytest.raises(ParseError, match="unified"):
            convert_descriptor(entry)

    def test_null_short_names(self):
        with pytest.raises(ParseError, match="short_names"):
            convert([descriptor("cat", short_names=None)])

    def test_non_string_image(self):
        with pytest.raises(ParseError, match="'image'"):
            convert_descriptor(descriptor("cat", image=42))

    def test_skin_variation_missing_unified(self):
        with pytest.raises(ParseError, match="1F3FB"):
            convert([descriptor("wave", skin_variations={"1F3FB": {"image": "x.png"}})])

    def test_skin_variation_missing_image(self):
        with pytest.raises(ParseError, match="'wave'"):
            convert_descriptor(descriptor("wave", skin_variations={"1F3FB": {"unified": "1F44B-1F3FB"}}))

    def test_skin_variation_not_an_object(self):
        with pytest.raises(ParseError):
            convert_descriptor(descriptor("wave", skin_variations={"1F3FB": "1f44b-1f3fb.png"}))

    def test_skin_variations_not_an_object(self):
        with pytest.raises(ParseError, match="skin_variations"):
            convert_descriptor(descriptor("wave", skin_variations=["1f44b-1f3fb.png"]))

    def test_null_skin_variations(self):
        assert convert_descriptor(descriptor("cat", skin_variations=None)).modifiers == ()


class TestConvert:
    def test_skips_without_apple_image(self):
        records = convert([
            descriptor("cat"),
            descriptor("android", has_img_apple=False),
            {"short_name": "nope"},
        ])
        assert [r.name for r in records] == ["cat"]

    def test_must_be_list(self):
        with pytest.raises(ParseError):
            convert({"short_name": "cat"})

    def test_entries_must_be_objects(self):
        with pytest.raises(ParseError):
            convert(["cat"])


class TestToJson:
    def test_field_order(self):
        text = to_json(convert([descriptor("cat", short_names=["cat", "kitty"])]))
        data = json.loads(text)
        assert list(data[0]) == ["name", "category", "image", "unicode", "aliases", "modifiers"]
        assert data[0]["aliases"] == ["kitty"]

    def test_pretty_printed(self):
        text = to_json(convert([descriptor("cat")]))
        assert text.startswith("[\n  {\n    \"name\": \"cat\"")

    def test_output_loads_as_catalogue(self):
        text = to_json(convert([descriptor("wave", skin_variations={
            "1F3FB": {"unified": "1F44B-1F3FB", "image": "1f44b-1f3fb.png"},
        })]))
        records = parse_catalogue(json.loads(text))
        assert records[0].modifiers[0].name == "skin-tone-2"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
