import json

import click
import pytest
from click.testing import CliRunner

from shamir_recover.audit import AuditTrail
from shamir_recover.cli import load_share_file, main
from shamir_recover.reconstruct import reconstruct
from shamir_recover.samples import DATASET_1, DATASET_2


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "dataset1.json"
    path.write_text(json.dumps(DATASET_1))
    return path


@pytest.fixture
def broken_file(tmp_path):
    data = dict(DATASET_1)
    data["2"] = {"base": "2", "value": "12"}
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(data))
    return path


def test_load_yaml_fixture(tmp_path):
    path = tmp_path / "shares.yaml"
    path.write_text(
        "keys: {n: 4, k: 3}\n"
        "1: {base: '10', value: '4'}\n"
        "2: {base: '2', value: '111'}\n"
        "3: {base: 10, value: '12'}\n"
    )
    data = load_share_file(path)
    assert set(data) == {"keys", "1", "2", "3"}
    assert reconstruct(data) == 3


def test_recover_prints_secret(runner, dataset_file):
    result = runner.invoke(main, ["recover", str(dataset_file)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{dataset_file}: 3"


def test_recover_json_output(runner, dataset_file):
    result = runner.invoke(main, ["recover", "--json", str(dataset_file)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output.strip())
    assert payload == {"source": str(dataset_file), "secret": "3", "threshold": 3}


def test_recover_stops_on_first_failure(runner, broken_file, dataset_file):
    result = runner.invoke(main, ["recover", str(broken_file), str(dataset_file)])
    assert result.exit_code == 1
    assert "Invalid digit" in result.output
    assert f"{dataset_file}: 3" not in result.output


def test_recover_keep_going(runner, broken_file, dataset_file):
    result = runner.invoke(main, ["recover", "--keep-going", str(broken_file), str(dataset_file)])
    assert result.exit_code == 1
    assert f"{broken_file}: error:" in result.output
    assert f"{dataset_file}: 3" in result.output


def test_recover_rejects_unparseable_file(runner, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    result = runner.invoke(main, ["recover", str(path)])
    assert result.exit_code == 1
    assert "cannot parse share file" in result.output


def test_recover_writes_audit_trail(runner, dataset_file, broken_file, tmp_path):
    audit_dir = tmp_path / "audit"
    result = runner.invoke(
        main,
        ["recover", "--keep-going", "--audit-dir", str(audit_dir), str(dataset_file), str(broken_file)],
    )
    assert result.exit_code == 1
    entries = [json.loads(p.read_text()) for p in audit_dir.glob("audit_*.json")]
    events = sorted(entry["payload"]["event"] for entry in entries)
    assert events == ["reconstruct.failed", "reconstruct.succeeded"]
    assert AuditTrail(audit_dir).verify_chain()


def test_demo_prints_both_datasets(runner):
    result = runner.invoke(main, ["demo"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines == [
        "Data Set 1 Reconstructed Value: 3",
        f"Data Set 2 Reconstructed Value: {reconstruct(DATASET_2)}",
    ]


def test_recover_keep_going_skips_undecodable_file(runner, dataset_file, tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{}")
    result = runner.invoke(main, ["recover", "--keep-going", str(path), str(dataset_file)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert f"{path}: error:" in result.output
    assert "cannot read share file" in result.output
    assert f"{dataset_file}: 3" in result.output


def test_load_share_file_reports_unreadable_path(tmp_path):
    with pytest.raises(click.ClickException) as excinfo:
        load_share_file(tmp_path)
    assert "cannot read share file" in excinfo.value.format_message()
