"""Tests for LayoutPlugin configuration, forms and render trees."""

import logging
from typing import Any

import pytest

from kingly_layouts.display_options import DisplayOptionCollector, FormState
from kingly_layouts.layout import LayoutPlugin, LayoutRegistry, LayoutValidationError
from kingly_layouts.layout.plugin import SIZING_ERROR, SIZING_PERMISSION

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


@pytest.fixture
def two_column(registry: LayoutRegistry, collector: DisplayOptionCollector) -> LayoutPlugin:
    return LayoutPlugin(registry.get_layout("kl_two_column"), collector=collector)


class TestConfiguration:
    """Tests for plugin configuration handling."""

    def test_configuration_fully_populated(
        self, two_column: LayoutPlugin, default_config: dict[str, Any]
    ) -> None:
        assert two_column.configuration == {"sizing_option": "50-50", **default_config}

    def test_stored_values_merge_over_defaults(
        self, registry: LayoutRegistry, collector: DisplayOptionCollector
    ) -> None:
        plugin = LayoutPlugin(
            registry.get_layout("kl_three_column"), {"sizing_option": "25-50-25", "gap_option": "md"}, collector
        )

        assert plugin.configuration["sizing_option"] == "25-50-25"
        assert plugin.configuration["gap_option"] == "md"
        assert plugin.configuration["container_type"] == "boxed"

    def test_sizing_class(self, two_column: LayoutPlugin) -> None:
        assert two_column.sizing_class() == "layout--kl_two_column--50-50"
        two_column.configuration["sizing_option"] = "bogus"
        assert two_column.sizing_class() is None


class TestForm:
    """Tests for the layout settings form."""

    def test_sizing_select_requires_capability(self, two_column: LayoutPlugin) -> None:
        denied = two_column.build_configuration_form()
        granted = two_column.build_configuration_form([SIZING_PERMISSION])

        assert denied.children["sizing_option"].access is False
        assert granted.children["sizing_option"].access is True
        assert granted.children["sizing_option"].weight == -10
        assert list(granted.children["sizing_option"].options) == ["50-50", "25-75", "75-25", "33-67", "67-33"]

    def test_single_sizing_has_no_select(self, registry: LayoutRegistry, collector: DisplayOptionCollector) -> None:
        plugin = LayoutPlugin(registry.get_layout("kl_one_column"), collector=collector)
        form = plugin.build_configuration_form([SIZING_PERMISSION])

        assert "sizing_option" not in form.children
        assert "spacing" in form.children

    def test_form_title_is_layout_label(self, two_column: LayoutPlugin) -> None:
        assert two_column.build_configuration_form().title == "Kingly: Two Column"


class TestSubmit:
    """Tests for validation and submission."""

    def test_unknown_sizing_is_an_error(self, two_column: LayoutPlugin) -> None:
        state = two_column.validate_configuration_form(FormState({"sizing_option": "90-10"}))
        assert state.get_errors() == {"sizing_option": SIZING_ERROR}

    def test_submit_with_errors_raises(self, two_column: LayoutPlugin) -> None:
        state = two_column.validate_configuration_form(FormState({"border": {"border_color": "red"}}))

        with pytest.raises(LayoutValidationError):
            two_column.submit_configuration_form(state)

    def test_submit_updates_configuration(self, two_column: LayoutPlugin) -> None:
        state = FormState(
            {"sizing_option": "25-75", "spacing": {"gap_option": {"mobile": "sm", "lg": "lg"}}}
        )
        configuration = two_column.submit_configuration_form(two_column.validate_configuration_form(state))

        assert configuration["sizing_option"] == "25-75"
        assert configuration["gap_option"] == {"mobile": "sm", "md": "_none", "lg": "lg"}
        assert two_column.configuration is configuration

    def test_submit_without_sizing_uses_default(self, two_column: LayoutPlugin) -> None:
        assert two_column.submit_configuration_form(FormState())["sizing_option"] == "50-50"


class TestRenderTree:
    """Tests for the plugin render tree."""

    def test_default_render_tree(self, two_column: LayoutPlugin) -> None:
        render = two_column.build_render_tree()

        assert render.classes == ["layout--kl_two_column--50-50", "kl--boxed"]
        assert render.libraries == [
            "kingly_layouts/kingly_utilities",
            "kingly_layouts/kl_layout_two_column",
            "kingly_layouts/base",
            "kingly_layouts/containers",
        ]

    def test_render_tree_is_fresh_each_time(self, two_column: LayoutPlugin) -> None:
        assert two_column.build_render_tree().to_dict() == two_column.build_render_tree().to_dict()
