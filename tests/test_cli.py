import errno
import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from bsm_core import mapping_table
from bsm_core import protocol as p
from bsm_inspect.cli import main


@pytest.fixture(autouse=True)
def restore_root_logging():
    # The group callback calls basicConfig against the runner's streams
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def invoke(*args):
    r = CliRunner().invoke(main, list(args))
    return r, (json.loads(r.output) if r.exit_code == 0 else None)


def test_to_local_mapped():
    r, out = invoke("to-local", str(p.BSM_ENOENT))
    assert r.exit_code == 0, r.output
    assert out["status"] == "MAPPED"
    assert out["local"] == errno.ENOENT
    assert out["local_name"] == "ENOENT"
    assert out["name"] == "BSM_ENOENT"


def test_to_local_unmapped_is_not_an_error():
    r, out = invoke("to-local", "255")
    assert r.exit_code == 0, r.output
    assert out["status"] == "UNMAPPED"
    assert out["local"] is None


def test_to_local_rejects_non_byte():
    r, _ = invoke("to-local", "256")
    assert r.exit_code == 2


def test_to_bsm_negative_errno_is_unknown():
    r, out = invoke("to-bsm", "--", "-999999")
    assert r.exit_code == 0, r.output
    assert out["status"] == "UNKNOWN"
    assert out["bsm"] == p.BSM_UNKNOWNERR
    assert out["name"] == "BSM_UNKNOWNERR"


def test_to_bsm_zero_is_success():
    r, out = invoke("to-bsm", "0")
    assert out["status"] == "MAPPED"
    assert out["bsm"] == p.BSM_ESUCCESS


def test_strerror_foreign_placeholder():
    r, out = invoke("strerror", "255")
    assert r.exit_code == 0, r.output
    assert out == {"bsm": 255, "foreign": True, "message": p.FOREIGN_ERROR_STR}


def test_strerror_local():
    r, out = invoke("strerror", str(p.BSM_EACCES))
    assert out["foreign"] is False
    assert out["message"] == os.strerror(errno.EACCES)


def test_table_dump():
    r, out = invoke("table")
    assert r.exit_code == 0, r.output
    assert out["platform"] == sys.platform
    assert out["entry_count"] == len(mapping_table())
    assert out["entries"][0] == {"bsm": 0, "local": 0, "local_name": None, "name": "BSM_ESUCCESS"}


def test_bad_log_level():
    r = CliRunner().invoke(main, ["--log-level", "chatty", "table"])
    assert r.exit_code == 2


def test_module_entry_point():
    repo = Path(__file__).resolve().parents[1]
    env = dict(os.environ, PYTHONPATH=str(repo / "src"))
    r = subprocess.run(
        [sys.executable, "-m", "bsm_inspect.cli", "to-local", str(p.BSM_ENOENT)],
        cwd=repo, env=env, check=False, capture_output=True, text=True,
    )
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == json.dumps(
        json.loads(r.stdout), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )
    assert json.loads(r.stdout)["local"] == errno.ENOENT


def test_unexpected_failure_is_one_fatal_line(monkeypatch):
    def boom(code):
        raise RuntimeError("table exploded")

    monkeypatch.setattr("bsm_inspect.cli.describe_bsm", boom)
    r = CliRunner().invoke(main, ["to-local", "2"])
    assert r.exit_code == 1
    assert r.output.strip().splitlines() == ["FATAL: table exploded"]


def test_log_level_from_environment():
    r = CliRunner(env={"BSM_ERRNO_LOG_LEVEL": "chatty"}).invoke(main, ["table"])
    assert r.exit_code == 2
    r = CliRunner(env={"BSM_ERRNO_LOG_LEVEL": "DEBUG"}).invoke(main, ["to-bsm", "0"])
    assert r.exit_code == 0, r.output


def run_module(*args, env_extra=None):
    repo = Path(__file__).resolve().parents[1]
    env = dict(os.environ, PYTHONPATH=str(repo / "src"))
    env.pop("BSM_ERRNO_LOG_LEVEL", None)
    env.update(env_extra or {})
    return subprocess.run(
        [sys.executable, "-m", "bsm_inspect.cli", *args],
        cwd=repo, env=env, check=False, capture_output=True, text=True,
    )


def test_table_build_logged_at_debug_from_environment():
    r = run_module("table", env_extra={"BSM_ERRNO_LOG_LEVEL": "DEBUG"})
    assert r.returncode == 0, r.stderr + r.stdout
    assert "Built BSM errno table" in r.stderr
    assert json.loads(r.stdout)["entry_count"] == len(mapping_table())


def test_table_build_logged_at_debug_from_option():
    r = run_module("--log-level", "DEBUG", "to-local", "2")
    assert r.returncode == 0, r.stderr + r.stdout
    assert "DEBUG bsm_core.table: Built BSM errno table" in r.stderr
    assert json.loads(r.stdout)["local"] == errno.ENOENT


def test_table_build_quiet_by_default():
    r = run_module("table")
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stderr == ""
