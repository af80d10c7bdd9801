import os
import sys

sys.path.insert(0, os.path.abspath("src"))

from stash_labels.labels import extract_model


def test_known_pattern_scoped_to_detected_brand():
    text = "Dunk Low\nSamba OG"
    assert extract_model(text, "Adidas", None, None) == "Samba Og"
    assert extract_model(text, "Nike", None, None) == "Dunk Low"


def test_known_pattern_without_brand_uses_table_order():
    assert extract_model("Samba OG\nDunk Low", None, None, None) == "Dunk Low"


def test_known_pattern_falls_back_to_full_table():
    # Puma has no patterns of its own; the Converse entry still fires
    assert extract_model("PUMA\nChuck Taylor All Star", "Puma", None, None) == "Chuck Taylor All Star"


def test_pattern_match_is_whitespace_collapsed():
    assert extract_model("AIR MAX 90   ESSENTIAL", "Nike", None, None) == "Air Max 90 Essential"


def test_brand_prefixed_line():
    text = "NIKE REACT SFB CARBON LOW\nBLACK/WHITE"
    assert extract_model(text, "Nike", None, "Black/White") == "React Sfb Carbon Low"


def test_brand_prefixed_colorway_is_not_a_model():
    text = "NIKE BLACK/WHITE\nPegasus Trail"
    assert extract_model(text, "Nike", None, "Black/White") == "Pegasus Trail"


def test_positional_scan_skips_sizes_origin_codes_and_colors():
    text = "\n".join(
        [
            "NIKE",
            "US 10",
            "MADE IN VIETNAM",
            "DD1391 100",
            "BLACK/WHITE",
            "Pegasus 40",
        ]
    )
    assert extract_model(text, "Nike", "DD1391-100", "Black/White") == "Pegasus 40"


def test_positional_scan_ignores_lines_before_brand():
    assert extract_model("Pegasus 40\nNIKE", "Nike", None, None) is None


def test_positional_scan_without_brand_starts_at_first_line():
    assert extract_model("Some Runner\nBLACK/WHITE", None, None, "Black/White") == "Some Runner"


def test_positional_scan_rejects_overlong_and_letterless_lines():
    text = "A" * 60 + "\n12345\n--\nTrail Runner"
    assert extract_model(text, None, None, None) == "Trail Runner"


def test_no_model_found():
    assert extract_model("12345\n--", None, None, None) is None
    assert extract_model("", None, None, None) is None
