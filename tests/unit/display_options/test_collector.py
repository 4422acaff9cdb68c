"""Tests for DisplayOptionCollector registration and aggregate phases."""

import logging
from typing import Any

import pytest

from kingly_layouts.display_options import (
    FEATURES,
    DisplayOption,
    DisplayOptionCollector,
    DisplayOptionDefinitionError,
    FeatureSpec,
    FieldSpec,
    FormElement,
    FormState,
    RenderTree,
    default_display_options,
)
from kingly_layouts.display_options.catalogs import SCALE
from kingly_layouts.display_options.features import BORDER, SPACING

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


class TestRegistration:
    """Tests for explicit service registration."""

    def test_standard_order(self, collector: DisplayOptionCollector) -> None:
        assert [service.id for service in collector.get_all()] == [feature.id for feature in FEATURES]
        assert len(collector) == 11

    def test_get_unknown_service(self, collector: DisplayOptionCollector) -> None:
        assert collector.get("nope") is None

    def test_custom_registration_list(self) -> None:
        """Only the services passed in are registered, in that order."""
        collector = DisplayOptionCollector([DisplayOption(BORDER), DisplayOption(SPACING)])
        assert [service.id for service in collector.get_all()] == ["border", "spacing"]

    def test_duplicate_id_rejected(self) -> None:
        with pytest.raises(DisplayOptionDefinitionError) as exc_info:
            DisplayOptionCollector([DisplayOption(SPACING), DisplayOption(SPACING)])
        assert exc_info.value.feature_id == "spacing"

    def test_shared_configuration_key_rejected(self) -> None:
        other = FeatureSpec(
            id="other",
            label="Other",
            form_key="other",
            fields=(FieldSpec("gap_option", "select", "Gap", options=SCALE),),
        )
        with pytest.raises(DisplayOptionDefinitionError, match="gap_option"):
            DisplayOptionCollector([DisplayOption(SPACING), DisplayOption(other)])

    def test_missing_label_rejected(self) -> None:
        unlabeled = FeatureSpec(id="unlabeled", label="", form_key="unlabeled")
        with pytest.raises(DisplayOptionDefinitionError):
            DisplayOptionCollector([DisplayOption(unlabeled)])

    def test_default_display_options_subset(self) -> None:
        services = default_display_options(features=(BORDER,))
        assert [service.id for service in services] == ["border"]


class TestConfiguration:
    """Tests for aggregated defaults and submission."""

    def test_keys_are_disjoint_and_complete(self, collector: DisplayOptionCollector) -> None:
        """Each stored key belongs to exactly one service."""
        keys: list[str] = []
        for service in collector.get_all():
            keys.extend(service.default_configuration())
        assert len(keys) == len(set(keys))
        assert set(keys) == set(collector.default_configuration())

    def test_documented_defaults(self, default_config: dict[str, Any]) -> None:
        assert default_config["container_type"] == "boxed"
        assert default_config["background_type"] == "color"
        assert default_config["border_color"] == ""
        assert default_config["vertical_alignment"] == "center"
        assert default_config["horizontal_alignment"] == "start"
        assert default_config["hide_on_breakpoints"] == []
        assert default_config["background_video_autoplay"] is True
        assert default_config["background_video_loop"] is False
        assert default_config["gap_option"] == {"mobile": "_none", "md": "_none", "lg": "_none"}

    def test_empty_submission_yields_defaults(
        self, collector: DisplayOptionCollector, default_config: dict[str, Any]
    ) -> None:
        config = collector.submit_form(FormState(), {})
        assert config == default_config

    def test_submission_overrides_stale_values(
        self, collector: DisplayOptionCollector, default_config: dict[str, Any]
    ) -> None:
        """Keys absent from the submission fall back to defaults, not stale values."""
        stale = {**default_config, "border_color": "#FF0000", "font_size_option": "3rem"}
        config = collector.submit_form(FormState({"border": {"border_radius_option": "sm"}}), stale)

        assert config["border_color"] == ""
        assert config["font_size_option"] == "_none"
        assert config["border_radius_option"] == "sm"


class TestCapabilities:
    """Tests for capability-gated forms."""

    def test_permissions_listed_per_service(self, collector: DisplayOptionCollector) -> None:
        permissions = collector.get_permissions()

        assert len(permissions) == 11
        assert "administer kingly layouts spacing" in permissions
        assert "administer kingly layouts colors" in permissions

    def test_access_follows_capabilities(
        self, collector: DisplayOptionCollector, default_config: dict[str, Any]
    ) -> None:
        form = collector.build_form(
            FormElement(type="form"),
            default_config,
            ["administer kingly layouts spacing", "administer kingly layouts container type"],
        )

        assert form.children["spacing"].access is True
        assert form.children["container_type"].access is True
        assert form.children["background"].access is False
        assert form.children["custom_attributes"].access is False

    def test_container_type_is_top_level(
        self, collector: DisplayOptionCollector, default_config: dict[str, Any]
    ) -> None:
        form = collector.build_form(FormElement(type="form"), default_config)
        container = form.children["container_type"]

        assert container.type == "select"
        assert container.weight == -9
        assert container.default_value == "boxed"


class TestRender:
    """Tests for aggregated rendering."""

    def test_idempotent_across_fresh_trees(
        self, collector: DisplayOptionCollector, default_config: dict[str, Any]
    ) -> None:
        config = {
            **default_config,
            "container_type": "edge-to-edge",
            "gap_option": {"mobile": "sm", "lg": "xl"},
            "background_type": "gradient",
            "background_gradient_start_color": "#000000",
            "background_gradient_end_color": "#FFFFFF",
            "animation_type": "fade-in",
            "custom_css_id": "promo",
        }

        first = collector.apply_to_render(RenderTree(), config)
        second = collector.apply_to_render(RenderTree(), config)
        assert first.to_dict() == second.to_dict()
        assert first.attributes == {"id": "promo"}
