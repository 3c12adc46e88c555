"""Unit tests for the pricing and validity engine."""

import math
from fractions import Fraction

import pytest

from productor.domain.model.configuration import (
    BoxOptions,
    CakeOptions,
    ProductConfiguration,
    ProductType,
    Shape,
)
from productor.domain.service.pricing import (
    ADDON_PRICES,
    BOX_PRICES,
    CAKE_BASE_PRICES,
    can_proceed,
    compute_price,
    with_recomputed_price,
)


def _cake(**options) -> ProductConfiguration:
    return ProductConfiguration(product_type=ProductType.CAKE, options=CakeOptions(**options))


def _box(product_type=ProductType.COOKIES, **options) -> ProductConfiguration:
    return ProductConfiguration(product_type=product_type, options=BoxOptions(**options))


# ── Cake pricing ─────────────────────────────────────────────────────────────


class TestCakePrice:

    def test_scenario_a_plain_eight_inch(self):
        assert compute_price(_cake(size="8", layers=1)) == 50

    def test_scenario_b_layers_compound_then_addons_added(self):
        # round(75 * 1.5^2) + 15 = round(168.75) + 15
        config = _cake(size="10", layers=3, addons=frozenset({"fruit"}))
        assert compute_price(config) == 184

    def test_scenario_c_bento_with_text_and_filling(self):
        config = _cake(size="Bento", layers=1, addons=frozenset({"text", "filling"}))
        assert compute_price(config) == 70

    @pytest.mark.parametrize("size", ["8", "10", "12", "Bento"])
    def test_single_layer_is_base_plus_addons(self, size):
        addons = frozenset({"fruit", "filling"})
        expected = CAKE_BASE_PRICES[size] + ADDON_PRICES["fruit"] + ADDON_PRICES["filling"]
        assert compute_price(_cake(size=size, layers=1, addons=addons)) == expected

    @pytest.mark.parametrize(
        "size,layers,expected",
        [
            ("8", 2, 75),      # 50 * 1.5
            ("8", 3, 113),     # 112.5, half rounds up
            ("10", 2, 113),    # 112.5, half rounds up
            ("12", 3, 225),    # 100 * 2.25
            ("12", 4, 338),    # 337.5, half rounds up
        ],
    )
    def test_layer_multiplier_compounds(self, size, layers, expected):
        assert compute_price(_cake(size=size, layers=layers)) == expected

    def test_multiplier_does_not_apply_to_addons(self):
        config = _cake(size="12", layers=2, addons=frozenset({"text"}))
        assert compute_price(config) == 150 + 10

    def test_blank_size_prices_only_addons(self):
        assert compute_price(_cake(size="", addons=frozenset({"fruit"}))) == 15

    def test_unknown_size_is_zero(self):
        assert compute_price(_cake(size="14")) == 0

    def test_unknown_addon_contributes_nothing(self):
        config = _cake(size="8", addons=frozenset({"sparklers"}))
        assert compute_price(config) == 50

    def test_flavor_text_and_shape_do_not_affect_price(self):
        plain = _cake(size="10")
        dressed = _cake(size="10", flavor="red velvet", text="Happy 30th", shape=Shape.HEART)
        assert compute_price(plain) == compute_price(dressed)

    def test_zero_layers_treated_as_single_layer(self):
        assert compute_price(_cake(size="8", layers=0)) == 50

    @pytest.mark.parametrize("layers", [60, 200, 1000])
    def test_large_layer_count_never_raises(self, layers):
        config = _cake(size="10", layers=layers, addons=frozenset({"fruit"}))
        exact = Fraction(75) * Fraction(3, 2) ** (layers - 1) + 15
        assert compute_price(config) == math.floor(exact + Fraction(1, 2))


# ── Box pricing ──────────────────────────────────────────────────────────────


class TestBoxPrice:

    def test_scenario_d_cookies_box_of_six(self):
        config = _box(box_size=6, box_flavors=("chocolate chip", "vanilla"))
        assert compute_price(config) == 28

    def test_scenario_e_muffins_without_box_size(self):
        assert compute_price(_box(ProductType.MUFFINS)) == 0

    @pytest.mark.parametrize("box_size", [4, 6, 12])
    def test_price_depends_only_on_box_size(self, box_size):
        one = _box(box_size=box_size, box_flavors=("vanilla",))
        two = _box(ProductType.MUFFINS, box_size=box_size, box_flavors=("oatmeal", "red velvet"))
        assert compute_price(one) == compute_price(two) == BOX_PRICES[box_size]

    def test_unknown_box_size_is_zero(self):
        assert compute_price(_box(box_size=9)) == 0


class TestDefensiveDefaults:

    def test_options_mismatching_product_type_price_zero(self):
        config = ProductConfiguration(product_type=ProductType.COOKIES, options=CakeOptions(size="12"))
        assert compute_price(config) == 0
        assert can_proceed(config) is False

    def test_unrecognised_product_type_price_zero(self):
        config = ProductConfiguration(product_type="brownies", options=CakeOptions(size="8"))  # type: ignore[arg-type]
        assert compute_price(config) == 0
        assert can_proceed(config) is False

    def test_price_is_idempotent(self):
        config = _cake(size="10", layers=3, addons=frozenset({"fruit", "text"}))
        assert compute_price(config) == compute_price(config)


# ── can_proceed ──────────────────────────────────────────────────────────────


class TestCanProceed:

    def test_complete_cake(self):
        assert can_proceed(_cake(size="8", flavor="vanilla", shape=Shape.CIRCLE))

    @pytest.mark.parametrize(
        "options",
        [
            {"size": "", "flavor": "vanilla"},
            {"size": "8", "flavor": ""},
            {"size": "8", "flavor": "vanilla", "shape": None},
        ],
    )
    def test_incomplete_cake(self, options):
        assert can_proceed(_cake(**options)) is False

    def test_scenario_d_box_with_flavor(self):
        assert can_proceed(_box(box_size=6, box_flavors=("chocolate chip", "vanilla")))

    def test_box_without_flavors(self):
        assert can_proceed(_box(box_size=6)) is False

    def test_scenario_e_box_without_size(self):
        assert can_proceed(_box(ProductType.MUFFINS, box_flavors=("vanilla",))) is False


class TestWithRecomputedPrice:

    def test_sets_price(self):
        config = with_recomputed_price(_cake(size="12"))
        assert config.price == 100

    def test_returns_same_instance_when_current(self):
        config = with_recomputed_price(_cake(size="12"))
        assert with_recomputed_price(config) is config
