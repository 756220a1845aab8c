"""
Tests for the codecondense Command Line
"""

from unittest.mock import patch

import pytest

from codecondense.cli import apply_llm_overrides, build_parser, main, resolve_options
from codecondense.configs.runtime import DEFAULT_CONFIG
from codecondense.configs.yaml_config import load_yaml_config
from codecondense.exceptions import ConfigurationError


@pytest.fixture
def cli_env(clean_env, temp_dir):
    """Isolated environment: no API keys, no user config."""
    clean_env.setenv("CODECONDENSE_DATA_PATH", str(temp_dir / ".data"))
    return clean_env


@pytest.fixture
def go_project(temp_dir):
    src = temp_dir / "src"
    src.mkdir()
    (src / "add.go").write_text("package calc\n\nimport \"fmt\"\n\nvar total int\n\nfunc Add(a, b int) int {\n\treturn a + b\n}\n")
    (src / "nested").mkdir()
    (src / "nested" / "mul.go").write_text("package nested\n\nfunc Mul(a, b int) int {\n\treturn a * b\n}\n")
    (src / "README.md").write_text("# calc\n")
    return src


class TestParser:
    """Test flag parsing and option resolution."""

    def test_camel_case_aliases(self):
        args = build_parser().parse_args(["--subDirs", "--no-extractGlobals", "--apiKey", "k", "--generateComments"])
        assert args.sub_dirs is True
        assert args.extract_globals is False
        assert args.api_key == "k"
        assert args.generate_comments is True

    def test_unset_flags_use_config(self):
        args = build_parser().parse_args([])
        options = resolve_options(args, DEFAULT_CONFIG)
        assert options.root_path == "."
        assert options.out_file == "output.txt"
        assert options.request.extract_functions
        assert options.request.include_methods
        assert not options.request.generate_comments
        assert options.modified_since is None

    def test_flags_override_config(self):
        config = {"extraction": {"functions": True}, "walk": {"min_size": 50}, "workers": 2}
        args = build_parser().parse_args(["--no-extract-funcs", "--size", "10", "--workers", "6"])
        options = resolve_options(args, config)
        assert not options.request.extract_functions
        assert options.min_size == 10
        assert options.workers == 6

    def test_api_key_routed_to_primary_provider(self):
        config = {"llm": {"primary_provider": "openai"}}
        args = build_parser().parse_args(["--provider", "anthropic", "--api-key", "secret"])
        apply_llm_overrides(args, config)
        assert config["llm"]["primary_provider"] == "anthropic"
        assert config["llm"]["anthropic"]["api_key"] == "secret"


class TestMain:
    """Test end-to-end runs."""

    def test_condense_directory(self, cli_env, go_project, temp_dir, capsys):
        out = temp_dir / "combined.txt"
        assert main(["--dir", str(go_project), "--out", str(out)]) == 0

        assert out.read_text() == (
            f"'''{go_project / 'add.go'}\n"
            "import \"fmt\"\n"
            "var total int\n"
            "func Add(a, b int) (int) {\n"
            "}\n"
            "\n'''\n"
        )
        assert f"Successfully combined code into {out}" in capsys.readouterr().out

    def test_sub_dirs_and_type(self, cli_env, go_project, temp_dir):
        out = temp_dir / "combined.txt"
        assert main(["--dir", str(go_project), "--sub-dirs", "--type", ".go", "--out", str(out)]) == 0
        content = out.read_text()
        assert "func Add(a, b int) (int) {" in content
        assert "func Mul(a, b int) (int) {" in content

    def test_generate_comments_with_stub(self, cli_env, go_project, temp_dir, stub_summarizer):
        out = temp_dir / "combined.txt"
        with patch("codecondense.cli.create_comment_generator", return_value=stub_summarizer):
            assert main(["--dir", str(go_project), "--generate-comments", "--out", str(out)]) == 0
        assert "func Add(a, b int) (int) {\n// Does something useful.\n}" in out.read_text()
        assert stub_summarizer.calls == [("func Add(a, b int) (int)", "go")]

    def test_comments_without_provider_fail(self, cli_env, go_project, temp_dir, capsys):
        out = temp_dir / "combined.txt"
        with patch("codecondense.cli.create_comment_generator", side_effect=ConfigurationError("none")):
            assert main(["--dir", str(go_project), "--generate-comments", "--out", str(out)]) == 1
        assert "API key not provided" in capsys.readouterr().err
        assert not out.exists()

    def test_no_api_key_needed_without_comments(self, cli_env, go_project, temp_dir):
        with patch("codecondense.cli.create_comment_generator") as mock_create:
            assert main(["--dir", str(go_project), "--out", str(temp_dir / "o.txt")]) == 0
        mock_create.assert_not_called()

    def test_invalid_modified_time(self, cli_env, go_project, temp_dir, capsys):
        assert main(["--dir", str(go_project), "--modified", "last week", "--out", str(temp_dir / "o.txt")]) == 1
        assert "Error walking file system" in capsys.readouterr().err

    def test_unwritable_output(self, cli_env, go_project, temp_dir, capsys):
        assert main(["--dir", str(go_project), "--out", str(temp_dir / "missing" / "o.txt")]) == 1
        assert "Error writing output" in capsys.readouterr().err

    def test_bad_config_file(self, cli_env, go_project, temp_dir, capsys):
        config = temp_dir / "config.yaml"
        config.write_text("- not\n- a mapping\n")
        assert main(["--dir", str(go_project), "--config", str(config)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_config_file_values_apply(self, cli_env, go_project, temp_dir):
        out = temp_dir / "from_config.txt"
        config = temp_dir / "config.yaml"
        config.write_text(f"extraction:\n  imports: false\n  globals: false\noutput:\n  path: {out}\n")
        assert main(["--dir", str(go_project), "--config", str(config)]) == 0
        assert "import" not in out.read_text()
        assert "func Add" in out.read_text()

    def test_parse_failure_does_not_abort(self, cli_env, go_project, temp_dir, capsys):
        (go_project / "broken.go").write_text("package calc\n\nfunc (\n")
        out = temp_dir / "combined.txt"
        assert main(["--dir", str(go_project), "--out", str(out)]) == 0
        assert "broken.go" in capsys.readouterr().err
        assert "func Add" in out.read_text()

    def test_init_config_writes_loadable_defaults(self, cli_env, go_project, temp_dir, capsys):
        config_path = temp_dir / ".data" / "config.yaml"
        assert main(["--init-config"]) == 0
        assert f"Created default config at {config_path}" in capsys.readouterr().out
        assert config_path.exists()

        assert main(["--init-config"]) == 0
        assert "already exists" in capsys.readouterr().out

        out = temp_dir / "combined.txt"
        assert main(["--dir", str(go_project), "--out", str(out)]) == 0
        assert "func Add(a, b int) (int) {" in out.read_text()

    def test_init_config_honours_config_env(self, cli_env, temp_dir):
        target = temp_dir / "elsewhere" / "codecondense.yaml"
        cli_env.setenv("CODECONDENSE_CONFIG", str(target))
        assert main(["--init-config"]) == 0
        assert load_yaml_config(target)["llm"]["primary_provider"] == "openai"

    def test_nanosecond_modified_time(self, cli_env, go_project, temp_dir):
        out = temp_dir / "o.txt"
        assert main(["--dir", str(go_project), "--modified", "2000-01-01T00:00:00.123456789Z", "--out", str(out)]) == 0
        assert "func Add" in out.read_text()
