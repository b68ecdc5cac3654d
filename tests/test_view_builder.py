"""Tests for building the settings view tree."""

from mod_config.gui.view_builder import EMPTY_TEXT, INTRO_TEXT, build_settings_view
from mod_config.options import SettingsService


class TestBuildSettingsView:
    """Test ordering and placeholder handling."""

    def test_empty_registry_gives_placeholder(self, service: SettingsService) -> None:
        """Test the placeholder for an empty registry."""
        view = build_settings_view(service.registry_snapshot(), service)
        assert view.is_empty
        assert view.sections == ()
        assert view.placeholder == EMPTY_TEXT

    def test_sections_sorted_by_display_name(self, service: SettingsService) -> None:
        """Test that sections are ordered by display name."""
        service.register_mod("first", "B Mod")
        service.register_mod("second", "A Mod")
        service.register_mod("third", "c mod")

        view = build_settings_view(service.registry_snapshot(), service)

        assert [s.name for s in view.sections] == ["A Mod", "B Mod", "c mod"]
        assert view.intro == INTRO_TEXT
        assert view.placeholder is None

    def test_rows_sorted_by_order_then_name(self, service: SettingsService) -> None:
        """Test that rows are ordered by order and then name."""
        service.register_option("m", "z", name="Zeta", order=1)
        service.register_option("m", "y", name="Alpha", order=2)
        service.register_option("m", "x", name="Beta", order=1)

        view = build_settings_view(service.registry_snapshot(), service)

        assert [row.option_id for row in view.sections[0].rows] == ["x", "z", "y"]

    def test_names_compare_ignoring_case(self, service: SettingsService) -> None:
        """Test that name ordering ignores case."""
        service.register_mod("upper", "C Mod")
        service.register_mod("lower", "b mod")
        service.register_option("upper", "u", name="C", order=1)
        service.register_option("upper", "l", name="b", order=1)

        view = build_settings_view(service.registry_snapshot(), service)

        assert [s.name for s in view.sections] == ["b mod", "C Mod"]
        upper = view.sections[1]
        assert [row.option_id for row in upper.rows] == ["l", "u"]

    def test_same_name_falls_back_to_id(self, service: SettingsService) -> None:
        """Test that equal names are ordered by id."""
        service.register_option("m", "second", name="Same", order=1)
        service.register_option("m", "first", name="Same", order=1)

        view = build_settings_view(service.registry_snapshot(), service)

        assert [row.option_id for row in view.sections[0].rows] == ["first", "second"]

    def test_rows_carry_current_values(self, demo_service: SettingsService) -> None:
        """Test that rows hold the current values."""
        demo_service.set("mod_a", "flag", False)

        view = build_settings_view(demo_service.registry_snapshot(), demo_service)
        values = {row.option_id: row.value for row in view.sections[0].rows}

        assert values == {"flag": False, "mode": "b", "count": 4}

    def test_mod_without_options_still_has_section(self, service: SettingsService) -> None:
        """Test that a mod without options still gets a section."""
        service.register_mod("bare", "Bare Mod", "Nothing to set")

        view = build_settings_view(service.registry_snapshot(), service)

        assert len(view.sections) == 1
        assert view.sections[0].description == "Nothing to set"
        assert view.sections[0].rows == ()
