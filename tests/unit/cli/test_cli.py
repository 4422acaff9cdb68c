"""Tests for the kingly-layouts command line."""

import json
import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from kingly_layouts import __main__ as entry_point
from kingly_layouts.cli import main
from kingly_layouts.cli.parser import create_parser, parse_region
from kingly_layouts.layout import LayoutRegistry


@pytest.fixture(autouse=True)
def quiet_package_logger() -> Generator[None, None, None]:
    """main() installs console handlers; remove them after each test."""
    yield
    package_logger = logging.getLogger("kingly_layouts")
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.CRITICAL)


@pytest.fixture
def data_dir(clean_settings: Path) -> Path:
    return clean_settings / "data"


def run(data_dir: Path, *args: str) -> int:
    return main(["--data-dir", str(data_dir), "--log-level", "CRITICAL", *args])


class TestParser:
    """Tests for argument parsing."""

    def test_layout_validated_against_registry(self) -> None:
        parser = create_parser(LayoutRegistry())

        assert parser.parse_args(["defaults", "kl_four_column"]).layout == "kl_four_column"
        with pytest.raises(SystemExit):
            parser.parse_args(["defaults", "kl_nine_column"])

    def test_layout_falls_back_to_default(self) -> None:
        parser = create_parser(LayoutRegistry(), default_layout="kl_three_column")

        assert parser.parse_args(["defaults"]).layout == "kl_three_column"
        assert parser.parse_args(["save", "hero", "--values", "v.yaml"]).layout == "kl_three_column"
        assert parser.parse_args(["render", "kl_one_column"]).layout == "kl_one_column"

    def test_layout_required_without_default(self) -> None:
        with pytest.raises(SystemExit):
            create_parser(LayoutRegistry()).parse_args(["defaults"])

    def test_unregistered_default_layout_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser(LayoutRegistry(), default_layout="kl_nine_column").parse_args(["defaults"])

    def test_region_argument(self) -> None:
        assert parse_region("first=<p>a=b</p>") == ("first", "<p>a=b</p>")

    def test_region_argument_requires_name(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["render", "kl_one_column", "--region", "=<p>x</p>"])

    def test_capability_options_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(
                ["form", "kl_one_column", "--capability", "x", "--all-capabilities"]
            )


class TestInspectionCommands:
    """Tests for list, defaults and form."""

    def test_list(self, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(data_dir, "list") == 0
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 4
        assert lines[0].startswith("* kl_one_column")
        assert "regions: first, second" in lines[1]

    def test_defaults(self, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(data_dir, "defaults", "kl_two_column") == 0
        defaults = json.loads(capsys.readouterr().out)

        assert defaults["sizing_option"] == "50-50"
        assert defaults["container_type"] == "boxed"
        assert defaults["border_color"] == ""

    def test_form_capabilities(self, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(data_dir, "form", "kl_two_column", "--all-capabilities") == 0
        granted = json.loads(capsys.readouterr().out)
        assert run(data_dir, "form", "kl_two_column", "--capability", "administer kingly layouts border") == 0
        limited = json.loads(capsys.readouterr().out)

        assert granted["children"]["sizing_option"]["access"] is True
        assert granted["children"]["background"]["access"] is True
        assert limited["children"]["sizing_option"]["access"] is False
        assert limited["children"]["border"]["access"] is True
        assert limited["children"]["background"]["access"] is False

    def test_unknown_layout_exits_with_usage_error(self, data_dir: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(data_dir, "defaults", "kl_nine_column")
        assert exc_info.value.code == 2


class TestSectionCommands:
    """Tests for save, show, delete and render."""

    @pytest.fixture
    def values_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "values.yaml"
        path.write_text(
            "sizing_option: 25-75\n"
            "spacing:\n"
            "  gap_option: {mobile: sm, lg: lg}\n"
            "border:\n"
            "  border_color: '#FF0000'\n",
            encoding="utf-8",
        )
        return path

    def test_save_show_render_delete(
        self, data_dir: Path, values_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(data_dir, "save", "hero", "kl_two_column", "--values", str(values_file)) == 0
        assert "Saved section 'hero'" in capsys.readouterr().out

        assert run(data_dir, "show", "hero") == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["layout_id"] == "kl_two_column"
        assert shown["configuration"]["sizing_option"] == "25-75"
        assert shown["configuration"]["gap_option"] == {"mobile": "sm", "md": "_none", "lg": "lg"}

        assert run(data_dir, "render", "kl_two_column", "--section", "hero", "--region", "first=<p>Hi</p>") == 0
        html = capsys.readouterr().out
        assert "layout--kl_two_column--25-75" in html
        assert "kl-gap-sm lg--kl-gap-lg" in html
        assert 'style="border-color: #FF0000;"' in html
        assert '<div class="layout__region layout__region--first"><p>Hi</p></div>' in html

        assert run(data_dir, "delete", "hero") == 0
        assert run(data_dir, "delete", "hero") == 1

    def test_save_reports_validation_errors(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        values = tmp_path / "bad.yaml"
        values.write_text("border: {border_color: '#12345'}\ncustom_attributes: {custom_css_id: '9x'}\n", encoding="utf-8")

        assert run(data_dir, "save", "hero", "kl_one_column", "--values", str(values)) == 1
        output = capsys.readouterr().out
        assert "border/border_color:" in output
        assert "custom_attributes/custom_css_id:" in output
        assert not (data_dir / "sections" / "sections.json").exists()

    def test_save_rejects_non_mapping_values(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        values = tmp_path / "list.yaml"
        values.write_text("- one\n- two\n", encoding="utf-8")

        assert run(data_dir, "save", "hero", "kl_one_column", "--values", str(values)) == 1
        assert "must contain a mapping" in capsys.readouterr().out

    def test_show_missing_section(self, data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(data_dir, "show", "ghost") == 1
        assert "Section 'ghost' not found" in capsys.readouterr().out

    def test_render_page_with_configuration_file(
        self, data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configuration = tmp_path / "configuration.yaml"
        configuration.write_text("animation_type: fade-in\n", encoding="utf-8")

        assert run(data_dir, "render", "kl_one_column", "--configuration", str(configuration), "--page") == 0
        page = capsys.readouterr().out
        assert page.startswith("<!DOCTYPE html>")
        assert '<script src="/static/kingly_layouts/js/animations.js"></script>' in page


class TestSettingsIntegration:
    """Tests for global options feeding settings."""

    def test_config_file_adds_layouts(
        self, clean_settings: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        layouts = clean_settings / "layouts.yaml"
        layouts.write_text("layouts:\n  - {id: kl_solo, label: Solo, regions: [content]}\n", encoding="utf-8")
        config = clean_settings / "settings.yaml"
        config.write_text(f"layouts_file: {layouts}\nstatic_base_url: /cdn\n", encoding="utf-8")

        assert main(["--config", str(config), "--log-level", "CRITICAL", "render", "kl_solo", "--page"]) == 0
        page = capsys.readouterr().out
        assert "layout--kl-solo" in page
        assert "/cdn/kingly_layouts/css/kingly-utilities.css" in page

    def test_default_layout_setting(self, clean_settings: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = clean_settings / "settings.yaml"
        config.write_text("default_layout: kl_two_column\n", encoding="utf-8")
        args = ["--config", str(config), "--data-dir", str(clean_settings / "data"), "--log-level", "CRITICAL"]

        assert main([*args, "defaults"]) == 0
        assert json.loads(capsys.readouterr().out)["sizing_option"] == "50-50"

        assert main([*args, "list"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("  kl_one_column")
        assert lines[1].startswith("* kl_two_column")

    def test_broken_layouts_file(self, clean_settings: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = clean_settings / "settings.yaml"
        config.write_text(f"layouts_file: {clean_settings / 'missing.yaml'}\n", encoding="utf-8")

        assert main(["--config", str(config), "--log-level", "CRITICAL", "list"]) == 1
        assert "Error loading layouts" in capsys.readouterr().out


class TestEntryPoint:
    """Tests for the python -m entry point."""

    def test_exit_code_propagates(self) -> None:
        with patch.object(entry_point, "cli_main", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                entry_point.main()
        assert exc_info.value.code == 0

    def test_keyboard_interrupt(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(entry_point, "cli_main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                entry_point.main()
        assert exc_info.value.code == 130
        assert "cancelled" in capsys.readouterr().out
