"""Tests for the option registry."""

from mod_config.options import ABSENT, OptionRegistry, OptionSpec, OptionType


class TestRegisterMod:
    """Test mod registration and merging."""

    def test_new_mod_defaults(self) -> None:
        """Test the defaults of a newly registered mod."""
        registry = OptionRegistry()
        entry = registry.register_mod("m")
        assert entry.name == "m"
        assert entry.description == ""
        assert "m" in registry
        assert not registry.is_empty()

    def test_merge_keeps_fields_not_given(self) -> None:
        """Test that registering again keeps fields not passed."""
        registry = OptionRegistry()
        registry.register_mod("m", "Nice Name", "About")
        registry.register_option("m", "o", type="boolean")

        registry.register_mod("m")
        entry = registry.get_mod("m")
        assert entry.name == "Nice Name"
        assert entry.description == "About"
        assert "o" in entry.options

        registry.register_mod("m", description="Changed")
        assert registry.get_mod("m").name == "Nice Name"
        assert registry.get_mod("m").description == "Changed"

    def test_unknown_mod_is_absent(self) -> None:
        """Test lookups of a mod that was never registered."""
        assert OptionRegistry().get_mod("nope") is ABSENT


class TestRegisterOption:
    """Test option registration."""

    def test_registers_mod_on_the_fly(self) -> None:
        """Test that an option registers its mod when needed."""
        registry = OptionRegistry()
        spec = registry.register_option("m", "o", {"type": "number", "default": 3})
        assert registry.get_mod("m").name == "m"
        assert spec.type is OptionType.NUMBER
        assert registry.get_default("m", "o") == 3

    def test_last_writer_wins(self) -> None:
        """Test that registering an option again replaces it."""
        registry = OptionRegistry()
        registry.register_option("m", "o", name="First", type="boolean", default=True)
        registry.register_option("m", "o", type="number")
        spec = registry.get_option("m", "o")
        assert spec.name == "o"
        assert spec.type is OptionType.NUMBER
        assert spec.default == 0

    def test_accepts_spec_and_renames(self) -> None:
        """Test registering a prepared spec under another id."""
        registry = OptionRegistry()
        spec = OptionSpec.create("other", type="boolean", default=True)
        stored = registry.register_option("m", "o", spec)
        assert stored.id == "o"
        assert registry.get_option("m", "o") is stored

    def test_lookups_of_unknown_options(self) -> None:
        """Test lookups of options that were never registered."""
        registry = OptionRegistry()
        registry.register_mod("m")
        assert registry.get_option("m", "missing") is ABSENT
        assert registry.get_default("m", "missing") is ABSENT
        assert registry.get_default("x", "y") is ABSENT


class TestSnapshot:
    """Test registry snapshots."""

    def test_snapshot_is_detached(self) -> None:
        """Test that a snapshot is unaffected by later registrations."""
        registry = OptionRegistry()
        registry.register_option("m", "a")
        snapshot = registry.snapshot()

        registry.register_option("m", "b")
        registry.register_mod("n")

        assert len(snapshot) == 1
        assert list(snapshot[0].options) == ["a"]
        assert len(registry) == 2


class TestValidate:
    """Test declaration checks."""

    def test_enum_without_values_is_error(self) -> None:
        """Test that an enum without choices is a validation error."""
        registry = OptionRegistry()
        registry.register_option("m", "e", type="enum")
        result = registry.validate()
        assert not result.is_valid
        assert "m/e" in result.errors[0]

    def test_suspicious_defaults_warn(self) -> None:
        """Test that defaults outside bounds or choices warn."""
        registry = OptionRegistry()
        registry.register_option("m", "e", type="enum", default="z", values=[("a", "A")])
        registry.register_option("m", "n", type="number", default=50, min=0, max=10)
        registry.register_option("m", "s", type="number", default="many")
        result = registry.validate()
        assert result.is_valid
        assert len(result.warnings) == 3

    def test_clean_registry(self) -> None:
        """Test that a consistent registry validates cleanly."""
        registry = OptionRegistry()
        registry.register_option("m", "b", type="boolean")
        registry.register_option("m", "n", type="number", default=5, min=0, max=10)
        result = registry.validate()
        assert result.is_valid
        assert result.warnings == []
