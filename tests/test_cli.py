import io
import json

import pytest

from text_metrics import cli


def _run(argv, stdin=""):
    args = cli.build_parser().parse_args(argv)
    out = io.StringIO()
    code = cli.cmd_analyze(args, stdin=io.StringIO(stdin), stdout=out)
    return code, [json.loads(line) for line in out.getvalue().splitlines()]


def test_analyze_inline_text():
    code, rows = _run(["analyze", "--text", "hello   world"])
    assert code == 0
    assert rows == [{"source": "<text>", "word_count": 2, "char_count": 10, "reading_time": 1}]


def test_analyze_reads_stdin():
    _, rows = _run(["analyze"], stdin="one two three")
    assert rows == [{"source": "<stdin>", "word_count": 3, "char_count": 11, "reading_time": 1}]


def test_analyze_files(tmp_path):
    first = tmp_path / "a.txt"
    first.write_text(" ".join(["word"] * 201), encoding="utf-8")
    second = tmp_path / "b.html"
    second.write_text("<p>hi <em>there</em></p>", encoding="utf-8")
    _, rows = _run(["analyze", str(first), str(second)])
    assert [r["reading_time"] for r in rows] == [2, 1]
    assert rows[1]["word_count"] == 2
    assert rows[0]["source"].endswith("a.txt")


def test_analyze_unsupported_file_exits(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b", encoding="utf-8")
    with pytest.raises(SystemExit, match="unsupported file type"):
        _run(["analyze", str(path)])


def test_main_prints_json(capsys):
    assert cli.main(["analyze", "--text", ""]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "source": "<text>",
        "word_count": 0,
        "char_count": 0,
        "reading_time": 0,
    }


@pytest.fixture
def uvicorn_calls(monkeypatch, tmp_path):
    import uvicorn

    for key in ("TEXT_METRICS_CONFIG", "TEXT_METRICS_HOST", "TEXT_METRICS_PORT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_serve_defaults(uvicorn_calls):
    assert cli.main(["serve"]) == 0
    (_, kwargs), = uvicorn_calls
    assert kwargs == {"host": "0.0.0.0", "port": 80, "log_config": None}


def test_serve_uses_config_file(uvicorn_calls, tmp_path):
    path = tmp_path / "serve.yaml"
    path.write_text("server:\n  host: 127.0.0.1\n  port: 8123\napi:\n  max_text_chars: 7\n", encoding="utf-8")
    cli.main(["serve", "--config", str(path)])
    (app, kwargs), = uvicorn_calls
    assert (kwargs["host"], kwargs["port"]) == ("127.0.0.1", 8123)
    assert app.state.config.api.max_text_chars == 7


def test_serve_port_option_overrides_config(uvicorn_calls, tmp_path):
    path = tmp_path / "serve.yaml"
    path.write_text("server:\n  port: 8123\n", encoding="utf-8")
    cli.main(["serve", "--config", str(path), "--port", "9000", "--host", "localhost"])
    (_, kwargs), = uvicorn_calls
    assert (kwargs["host"], kwargs["port"]) == ("localhost", 9000)


def test_serve_port_from_env(uvicorn_calls, monkeypatch):
    monkeypatch.setenv("TEXT_METRICS_PORT", "8800")
    cli.main(["serve"])
    (_, kwargs), = uvicorn_calls
    assert kwargs["port"] == 8800
