import json

import pytest

from cli import EXIT_DIFFERENT, EXIT_INVALID, EXIT_OK, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
  monkeypatch.delenv("MAGNET_LOG_LEVEL", raising=False)
  monkeypatch.delenv("MAGNET_OUTPUT_FORMAT", raising=False)


def test_parse_prints_one_line_per_parameter(capsys):
  code = main(["parse", "magnet:?xt.1=A&xt.2=B&dn=Name"])

  out = capsys.readouterr().out.splitlines()
  assert code == EXIT_OK
  assert out == ["xt\t1\tA", "xt\t2\tB", "dn\t-\tName"]


def test_parse_json_output_from_flag(capsys):
  code = main(["--format", "json", "parse", "magnet:?kt=martin+luther+king+mp3"])

  payload = json.loads(capsys.readouterr().out)
  assert code == EXIT_OK
  assert payload["keyword_topics"] == ["martin+luther+king+mp3"]
  assert payload["parameters"] == [{"prefix": "kt", "index": None, "value": "martin+luther+king+mp3"}]


def test_parse_json_output_from_environment(monkeypatch, capsys):
  monkeypatch.setenv("MAGNET_OUTPUT_FORMAT", "json")

  code = main(["parse", "magnet:?xt=A"])

  assert code == EXIT_OK
  assert json.loads(capsys.readouterr().out)["exact_topics"] == ["A"]


def test_normalize_prints_canonical_form(capsys):
  code = main(["normalize", "magnet:?mt=M&dn=D&xt.4=A&xt.9=B"])

  assert code == EXIT_OK
  assert capsys.readouterr().out.strip() == "magnet:?xt.1=A&xt.2=B&dn=D&mt=M"


def test_compare_equal_uris(capsys):
  code = main(["compare", "magnet:?xt=A&dn=B", "magnet:?dn=B&xt=A"])

  assert code == EXIT_OK
  assert capsys.readouterr().out.strip() == "equal"


def test_compare_different_uris(capsys):
  code = main(["compare", "magnet:?xt=A", "magnet:?xt.1=A"])

  assert code == EXIT_DIFFERENT
  assert capsys.readouterr().out.strip() == "different"


def test_invalid_uri_reports_error(capsys):
  code = main(["parse", "magnet:?unknown=value"])

  captured = capsys.readouterr()
  assert code == EXIT_INVALID
  assert captured.out == ""
  assert 'Unknown parameter prefix: "unknown"' in captured.err


def test_invalid_log_level_flag_exits(capsys):
  with pytest.raises(SystemExit) as excinfo:
    main(["--log-level", "chatty", "normalize", "magnet:?xt=A"])

  assert excinfo.value.code == 2
  assert "chatty" in capsys.readouterr().err
