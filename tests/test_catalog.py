import pytest

from spectro_color.catalog import EXAMPLES, example_colors, find_example
from spectro_color.observed import get_absorbed_color, get_observed_color


@pytest.mark.parametrize("name", ["β-Carotene", "KMnO₄", "Dichromate Ion (Cr₂O₇²⁻)"])
def test_single_band_examples_match_ideal(name):
    ex = find_example(name)
    assert example_colors(ex, "ideal")["observed"] == ex.appears_hex


def test_chlorophyll_uses_both_wavelengths():
    ex = find_example("chlorophyll-a")
    assert ex.wavelengths == [430, 662]
    colors = example_colors(ex, "ideal")
    assert colors["observed"] == "#80ff80"
    assert colors["absorbed"] == get_absorbed_color(430)


def test_real_mode_single_wavelength():
    ex = find_example("β-Carotene")
    assert example_colors(ex, "real")["observed"] == get_observed_color(450, "real")


def test_catalog_shape():
    assert len(EXAMPLES) == 5
    assert all(ex.wavelength2 is None for ex in EXAMPLES if ex.name != "Chlorophyll-a")
    with pytest.raises(KeyError):
        find_example("Unobtainium")
