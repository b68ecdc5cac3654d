"""Tests for option types and value semantics."""

import pickle

import pytest

from mod_config.options.types import (
    ABSENT,
    ConfigError,
    EnumChoice,
    OptionSpec,
    OptionType,
    values_equal,
)


class TestAbsent:
    """Test the no-value marker."""

    def test_absent_is_falsy_singleton(self) -> None:
        """Test that ABSENT is a falsy singleton."""
        assert not ABSENT
        assert type(ABSENT)() is ABSENT
        assert repr(ABSENT) == "ABSENT"

    def test_absent_survives_pickle(self) -> None:
        """Test that ABSENT stays the same object after pickling."""
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


class TestValuesEqual:
    """Test structural equality of option values."""

    def test_scalars(self) -> None:
        """Test which values count as option values."""
        assert values_equal(3, 3)
        assert values_equal(3, 3.0)
        assert values_equal("x", "x")
        assert not values_equal("x", "y")

    def test_bool_and_number_differ(self) -> None:
        """Test that booleans never equal numbers."""
        assert not values_equal(True, 1)
        assert not values_equal(0, False)
        assert values_equal(False, False)

    def test_absent_only_equals_itself(self) -> None:
        """Test that ABSENT equals only itself."""
        assert values_equal(ABSENT, ABSENT)
        assert not values_equal(ABSENT, False)
        assert not values_equal(0, ABSENT)


class TestOptionType:
    """Test option type parsing."""

    def test_parse_names(self) -> None:
        """Test parsing option type names."""
        assert OptionType.parse("boolean") is OptionType.BOOLEAN
        assert OptionType.parse("Enum") is OptionType.ENUM
        assert OptionType.parse(OptionType.NUMBER) is OptionType.NUMBER

    def test_missing_type_is_boolean(self) -> None:
        """Test that a missing type means boolean."""
        assert OptionType.parse(None) is OptionType.BOOLEAN

    def test_unknown_type_raises(self) -> None:
        """Test that an unknown type name raises."""
        with pytest.raises(ConfigError):
            OptionType.parse("slider")


class TestOptionSpecCreate:
    """Test spec normalisation."""

    def test_defaults_by_type(self) -> None:
        """Test the default used for each option type."""
        assert OptionSpec.create("a", type="boolean").default is False
        assert OptionSpec.create("b", type="number").default == 0
        assert OptionSpec.create("c", type="enum", values=[("x", "X")]).default is ABSENT

    def test_none_default_is_unsupplied(self) -> None:
        """Test that a None default counts as not supplied."""
        spec = OptionSpec.create("n", type="number", default=None)
        assert spec.default == 0
        assert spec.has_default

    def test_falsy_default_is_kept(self) -> None:
        """Test that falsy defaults are kept."""
        spec = OptionSpec.create("f", type="boolean", default=False)
        assert spec.default is False
        spec = OptionSpec.create("s", type="enum", default="", values=[("", "None")])
        assert spec.default == ""

    def test_name_falls_back_to_id(self) -> None:
        """Test that the display name falls back to the id."""
        spec = OptionSpec.create("my_option")
        assert spec.name == "my_option"
        assert spec.type is OptionType.BOOLEAN
        assert spec.order == 1
        assert spec.step == 1

    def test_legacy_aliases(self) -> None:
        """Test the older parameter names."""
        spec = OptionSpec.create(
            "mode",
            type="enum",
            desc="Pick one",
            values=[{"value": 1, "label": "One"}, {"value": 2}],
        )
        assert spec.description == "Pick one"
        assert spec.choices == (EnumChoice(1, "One"), EnumChoice(2, "2"))

    def test_choice_without_value_raises(self) -> None:
        """Test that a choice without a value raises."""
        with pytest.raises(ConfigError):
            OptionSpec.create("mode", type="enum", values=[{"label": "One"}])

    def test_invalid_step_raises(self) -> None:
        """Test that a non-positive step raises."""
        with pytest.raises(ConfigError):
            OptionSpec.create("n", type="number", step=0)

    def test_inverted_bounds_raise(self) -> None:
        """Test that a minimum above the maximum raises."""
        with pytest.raises(ConfigError):
            OptionSpec.create("n", type="number", min=5, max=1)
