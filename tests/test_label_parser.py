import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

sys.path.insert(0, os.path.abspath("src"))

from stash_labels import ParsedLabel, parse_label
from stash_labels.labels import LabelParser, build_tables
from stash_labels.domain.models import BrandEntry


def test_nike_box_label():
    result = parse_label("NIKE\nAir Force 1 '07\nCW2288-111\nWHITE/WHITE")
    assert result == ParsedLabel(
        brand="Nike",
        model="Air Force 1 '07",
        style_code="CW2288-111",
        colorway="White/White",
    )


def test_adidas_label():
    result = parse_label("ADIDAS\nUltraBoost 22\nFY2903")
    assert result.to_dict() == {
        "brand": "Adidas",
        "model": "Ultraboost 22",
        "styleCode": "FY2903",
        "colorway": None,
    }


def test_empty_input_gives_empty_record():
    assert parse_label("") == ParsedLabel()
    assert parse_label("").is_empty()
    assert parse_label(None) == ParsedLabel()


def test_screenshot_noise_is_ignored():
    result = parse_label("11:26\n85%\nNIKE\nDunk Low Retro\n$120.00\nFree shipping")
    assert result.brand == "Nike"
    assert result.model == "Dunk Low Retro"
    assert result.style_code is None
    assert result.colorway is None


def test_raw_text_used_when_everything_is_noise():
    result = parse_label("#nike dunk low\n$99")
    assert result.brand == "Nike"
    assert result.model == "Dunk Low"


def test_brand_prefixed_model_line():
    result = parse_label("On Cloud 5\nWHITE/GLACIER")
    assert result.brand == "On"
    assert result.model == "Cloud 5"
    assert result.colorway == "White/Glacier"


def test_new_balance_label():
    result = parse_label("NEW BALANCE\nM990GL5\nMADE IN USA")
    assert result.brand == "New Balance"
    assert result.style_code == "M990GL5"
    assert result.model is None


def test_positional_model_on_shoe_box():
    raw = "\n".join(
        [
            "NIKE",
            "PEGASUS 40",
            "US 10 UK 9 EUR 44",
            "DV3853 001",
            "BLACK/WHITE-IRON GREY",
            "MADE IN VIETNAM",
        ]
    )
    result = parse_label(raw)
    assert result.brand == "Nike"
    assert result.model == "Pegasus 40"
    assert result.style_code == "DV3853-001"
    assert result.colorway == "Black/White"


def test_input_is_not_mutated():
    raw = "NIKE\nAir Force 1 '07"
    parse_label(raw)
    assert raw == "NIKE\nAir Force 1 '07"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        " ",
        "\n\n\n",
        "/",
        "A/B",
        "NIKE NIKE",
        "\x00\x01",
        "💥/💥",
        "NIKE\n" * 200,
        "((((((((",
        "ON",
        "$",
        "DM4044 108 108 108",
        "\r\nADIDAS\r\nSamba\r\n",
    ],
)
def test_parse_never_raises_and_fields_are_none_or_non_empty(raw):
    result = parse_label(raw)
    for value in result.to_dict().values():
        assert value is None or (isinstance(value, str) and value != "")


def test_custom_tables():
    tables = build_tables(extra_brands=[BrandEntry("Karhu", ("KARHU",))])
    parser = LabelParser(tables)
    result = parser.parse("KARHU\nFusion 2.0")
    assert result.brand == "Karhu"
    assert result.model == "Fusion 2.0"
    # module-level default tables are untouched
    assert parse_label("KARHU\nFusion 2.0").brand is None


def test_parser_is_safe_to_share_between_threads():
    inputs = ["NIKE\nAir Force 1 '07\nCW2288-111\nWHITE/WHITE", "ADIDAS\nUltraBoost 22\nFY2903"] * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(parse_label, inputs))
    assert {r.brand for r in results} == {"Nike", "Adidas"}
    assert results[0].model == "Air Force 1 '07"
    assert results[1].model == "Ultraboost 22"


def test_non_ascii_digits_are_not_a_style_code():
    result = parse_label("NIKE\nDM٤٠٤٤ ١٠٨")
    assert result.brand == "Nike"
    assert result.style_code is None


@pytest.mark.parametrize("raw", ["A " * 8000, "NIKE\n1/ " + "A " * 8000, "B/" * 8000])
def test_large_input_parses_quickly(raw):
    start = time.perf_counter()
    parse_label(raw)
    assert time.perf_counter() - start < 1.0


def test_star_import_exposes_public_api():
    namespace = {}
    exec("from stash_labels import *", namespace)
    assert namespace["parse_label"] is parse_label
    assert namespace["ParsedLabel"] is ParsedLabel
