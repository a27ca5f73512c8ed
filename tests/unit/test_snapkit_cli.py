"""CLI tests - tests for snapkit/cli."""

import io
import json
import logging
from contextlib import redirect_stderr, redirect_stdout

import pytest
import yaml

from snapkit import __version__
from tests.unit.conftest import CHROME_DESKTOP_UA

pytestmark = pytest.mark.cli

BASE = "https://image-proxy.snapkit.com/image/acme"


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from snapkit.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()


def test_version_flag():
    rc, out, _ = run_cli(["--version"])
    assert rc == 0
    assert f"snapkitc {__version__}" in out


def test_help_flag():
    rc, out, _ = run_cli(["--help"])
    assert rc == 0
    assert "render" in out
    assert "browser" in out


def test_no_command_shows_help():
    rc, out, _ = run_cli([])
    assert rc == 0
    assert "urls" in out


def test_invalid_display_format():
    rc, _out, err = run_cli(["--display", "xml", "browser", "x"])
    assert rc == 1
    assert "--display must be 'json' or 'yaml'" in err


def test_render_json(clean_env):
    rc, out, _ = run_cli(["--display", "json", "render", "p.jpg", "--org", "acme", "--width", "800", "--height", "600"])
    assert rc == 0
    output = json.loads(out)
    assert output["render"]["url"] == f"{BASE}/p.jpg?w=800&h=600&quality=85"
    assert output["errors"] == []


def test_render_yaml_is_default(clean_env):
    rc, out, _ = run_cli(["render", "p.jpg", "--org", "acme", "--width", "400", "--sizes", "400px"])
    assert rc == 0
    output = yaml.safe_load(out)
    assert output["render"]["src_set"].endswith(" 800w")


def test_render_html(clean_env):
    rc, out, _ = run_cli(
        ["--display", "json", "render", "p.jpg", "--org", "acme", "--width", "100", "--html", "--alt", "Hero"]
    )
    assert rc == 0
    assert json.loads(out)["html"].startswith("<img ")


def test_render_uses_user_agent(clean_env):
    rc, out, _ = run_cli(
        ["--display", "json", "render", "p.jpg", "--org", "acme", "--width", "100", "--user-agent", CHROME_DESKTOP_UA]
    )
    assert rc == 0
    assert "format=avif" in json.loads(out)["render"]["url"]


def test_render_failure_exits_nonzero(clean_env):
    rc, out, err = run_cli(["--display", "json", "render", "p.jpg", "--width", "100"])
    assert rc == 1
    assert json.loads(out)["errors"]
    assert "SNAPKIT_ORGANIZATION_NAME" in err


def test_urls(clean_env):
    rc, out, _ = run_cli(["--display", "json", "urls", "p.jpg", "--org", "acme", "--width", "300"])
    assert rc == 0
    assert json.loads(out)["urls"]["webp"] == f"{BASE}/p.jpg?w=300&format=webp"


def test_browser(clean_env):
    rc, out, _ = run_cli(["--display", "json", "browser", CHROME_DESKTOP_UA])
    assert rc == 0
    output = json.loads(out)
    assert output["browser"]["name"] == "chrome"
    assert output["support"] == {"avif": True, "webp": True}


def test_config_from_environment(clean_env):
    clean_env.setenv("SNAPKIT_ORGANIZATION_NAME", "acme")
    rc, out, _ = run_cli(["--display", "json", "config"])
    assert rc == 0
    assert json.loads(out)["content"]["organization_name"] == "acme"


def test_verbose_logs_engine_decisions(clean_env, caplog):
    rc, _out, _err = run_cli(["--verbose", "render", "p.jpg", "--org", "acme", "--width", "100"])
    assert rc == 0
    assert "DPR srcset" in caplog.text
    assert logging.getLogger("snapkit").level == logging.DEBUG


def test_quiet_by_default(clean_env, caplog):
    rc, _out, _err = run_cli(["render", "p.jpg", "--org", "acme", "--width", "100"])
    assert rc == 0
    assert "DPR srcset" not in caplog.text


def test_display_json_reaches_every_command(clean_env):
    clean_env.setenv("SNAPKIT_ORGANIZATION_NAME", "acme")
    for args in (["browser", CHROME_DESKTOP_UA], ["urls", "p.jpg"], ["config"], ["render", "p.jpg", "--width", "10"]):
        rc, out, _ = run_cli(["--display", "json", *args])
        assert rc == 0, args
        assert isinstance(json.loads(out), dict), args


def test_unknown_option_is_usage_error(clean_env):
    rc, out, err = run_cli(["render", "p.jpg", "--no-such-option"])
    assert rc == 2
    assert out == ""
    assert "--no-such-option" in err


def test_display_format_walks_context_parents():
    import typer

    from snapkit.cli._handle_stage_result import _display_format

    app = typer.Typer()

    @app.command()
    def noop() -> None:
        pass

    command = typer.main.get_command(app)
    parent = typer.Context(command, obj={"display_format": "json"})
    child = typer.Context(command, parent=parent)
    assert _display_format(child) == "json"
    assert _display_format(typer.Context(command)) == "yaml"
    assert _display_format(None) == "yaml"
