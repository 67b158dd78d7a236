"""
End-to-end compilation tests

Tests the full pipeline: YAML style document -> env_check -> source_parse
-> css_compile -> stylesheets and manifest on disk.
"""

import json
import tempfile
from pathlib import Path

import pytest

from atomcss.__main__ import css_compile, env_check, results_report, source_parse
from atomcss.models import ProgramState, pipeline


DOCUMENT = """
keyframes:
  slideIn:
    from: {start: 0}
    to: {start: 500}
styles:
  button:
    backgroundColor: {default: white, ":hover": "#eee"}
    marginStart: 12
  link:
    backgroundColor: white
"""


def state_make(tmpdir, source, **overrides):
    inputdir = Path(tmpdir) / "in"
    outputdir = Path(tmpdir) / "out"
    inputdir.mkdir()
    (inputdir / "styles.yaml").write_text(source)
    return ProgramState(
        inputdir=inputdir,
        outputdir=outputdir,
        verbosity=0,
        inputFile="styles.yaml",
        **overrides,
    )


class TestPipeline:
    """Test the full compile pipeline"""

    def test_logical_document(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(
                state_make(tmpdir, DOCUMENT), env_check, source_parse, css_compile, results_report
            )

            assert state.compileResult["status"] is True
            assert state.compileResult["rule_count"] == 4

            ltr = Path(state.compileResult["ltr_file"]).read_text()
            assert "@keyframes x1id2van-B{from{inset-inline-start:0px;}" in ltr
            assert "margin-inline-start:12px;" in ltr

            manifest = json.loads(Path(state.compileResult["manifest_file"]).read_text())
            assert manifest["keyframes"]["slideIn"] == "x1id2van-B"
            button_background = manifest["styles"]["button"]["backgroundColor"].split()
            assert manifest["styles"]["link"]["backgroundColor"] == button_background[0]

    def test_physical_document_has_rtl_sheet(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(
                state_make(tmpdir, DOCUMENT, styleResolution="physical"),
                env_check, source_parse, css_compile,
            )

            ltr = Path(state.compileResult["ltr_file"]).read_text()
            rtl = Path(state.compileResult["rtl_file"]).read_text()
            assert "margin-left:12px;" in ltr
            assert "margin-right:12px;" in rtl
            assert "from{right:0px;}" in rtl

    def test_output_subdir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(
                state_make(tmpdir, DOCUMENT, outputSubdir="css"), env_check, source_parse, css_compile
            )
            assert Path(state.compileResult["ltr_file"]) == Path(tmpdir) / "out" / "css" / "styles.css"

    def test_empty_document(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(state_make(tmpdir, ""), env_check, source_parse, css_compile)
            assert state.compileResult["rule_count"] == 0


class TestPipelineErrors:
    """Test pipeline exits"""

    def test_missing_input(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir, DOCUMENT)
            state.inputFile = "missing.yaml"
            with pytest.raises(SystemExit):
                env_check(state)

    def test_not_a_mapping(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit):
                pipeline(state_make(tmpdir, "- a\n- b\n"), env_check, source_parse)

    def test_compile_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            source = "keyframes:\n  bad:\n    middle: {color: red}\n"
            with pytest.raises(SystemExit):
                pipeline(state_make(tmpdir, source), env_check, source_parse, css_compile)

    def test_strict_rejects_unknown_property(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            source = "styles:\n  card:\n    fooBar: baz\n"
            with pytest.raises(SystemExit):
                pipeline(state_make(tmpdir, source, strict=True), env_check, source_parse, css_compile)

    def test_report_without_result(self):
        with pytest.raises(SystemExit):
            results_report(ProgramState())


class TestSettingsOverrides:
    """Test how CLI options and environment settings combine"""

    def test_unset_options_add_nothing(self):
        assert ProgramState().settings_overrides() == {}

    def test_given_options_override(self):
        state = ProgramState(styleResolution="physical", strict=True)
        assert state.settings_overrides() == {
            "style_resolution": "physical",
            "strict_values": True,
            "strict_properties": True,
        }

    def test_environment_applies_without_cli_option(self, monkeypatch):
        monkeypatch.setenv("ATOMCSS_STYLE_RESOLUTION", "physical")
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(state_make(tmpdir, DOCUMENT), env_check, source_parse, css_compile)
            ltr = Path(state.compileResult["ltr_file"]).read_text()
            assert "margin-left:12px;" in ltr

    def test_cli_option_beats_environment(self, monkeypatch):
        monkeypatch.setenv("ATOMCSS_STYLE_RESOLUTION", "physical")
        with tempfile.TemporaryDirectory() as tmpdir:
            state = pipeline(
                state_make(tmpdir, DOCUMENT, styleResolution="logical"),
                env_check, source_parse, css_compile,
            )
            ltr = Path(state.compileResult["ltr_file"]).read_text()
            assert "margin-inline-start:12px;" in ltr

    def test_environment_strict_applies(self, monkeypatch):
        monkeypatch.setenv("ATOMCSS_STRICT_PROPERTIES", "true")
        with tempfile.TemporaryDirectory() as tmpdir:
            source = "styles:\n  card:\n    fooBar: baz\n"
            with pytest.raises(SystemExit):
                pipeline(state_make(tmpdir, source), env_check, source_parse, css_compile)
