import json

import pytest

from skillscout.cli import parse_list_args, run_cli


def test_recommend_prints_json(tools, capsys):
    assert run_cli(["recommend", "I", "need", "to", "fix", "this", "bug"], tools=tools) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["originalPrompt"] == "I need to fix this bug"
    assert payload["recommendations"][0]["skillName"] == "systematic-debugging"


def test_recommend_reads_stdin(tools, capsys, monkeypatch):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("hello world\n"))
    assert run_cli(["recommend"], tools=tools) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"recommendations": [], "originalPrompt": "hello world\n"}


def test_list_with_bounds(tools, capsys):
    assert run_cli(["list", "--min", "20", "--max-priority", "22"], tools=tools) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["total"] == 2


def test_tools_prints_definitions(tools, capsys):
    assert run_cli(["tools"], tools=tools) == 0
    names = [d["name"] for d in json.loads(capsys.readouterr().out)]
    assert names == ["recommend_skills", "list_skills"]


@pytest.mark.parametrize("argv", [[], ["explode"], ["list", "--min"], ["list", "--min", "ten"], ["list", "--top", "3"]])
def test_usage_errors(tools, capsys, argv):
    assert run_cli(argv, tools=tools) == 1
    assert "Usage" in capsys.readouterr().err


def test_parse_list_args():
    assert parse_list_args([]) == {}
    assert parse_list_args(["--min", "12", "--max", "20.5"]) == {"minPriority": 12, "maxPriority": 20.5}
