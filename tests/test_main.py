"""Tests for the graphlane command line."""

import json

import pygit2

from graphlane.main import main, parse_args


def _make_repo(path) -> pygit2.Repository:
    repo = pygit2.init_repository(str(path), initial_head="main")
    sig = pygit2.Signature("Test User", "test@example.com", 1_000, 0)
    tree = repo.TreeBuilder().write()
    first = repo.create_commit("refs/heads/main", sig, sig, "First", tree, [])
    sig = pygit2.Signature("Test User", "test@example.com", 2_000, 0)
    repo.create_commit("refs/heads/main", sig, sig, "Second", tree, [first])
    return repo


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.repo is None
        assert args.max_count is None
        assert args.config is None
        assert args.verbose is False

    def test_options(self):
        args = parse_args(["some/repo", "--max-count", "5", "--indent", "2", "-v"])
        assert args.repo == "some/repo"
        assert args.max_count == 5
        assert args.indent == 2
        assert args.verbose is True


class TestMain:
    """End to end against a real repository."""

    def test_prints_graph_json(self, tmp_path, capsys):
        repo = _make_repo(tmp_path / "repo")

        status = main([repo.workdir, "--config", str(tmp_path / "settings.json")])

        assert status == 0
        data = json.loads(capsys.readouterr().out)
        assert [node["commit"]["payload"]["summary"] for node in data["nodes"]] == ["Second", "First"]
        assert [node["x"] for node in data["nodes"]] == [0, 0]
        assert data["paths"] == [{"d": "M 10 20 L 10 60", "color": data["nodes"][0]["color"]}]
        assert data["decorations"] == [
            {"name": "main", "sha": data["nodes"][0]["commit"]["sha"], "type": "branch"}
        ]

    def test_uses_settings_file(self, tmp_path, capsys):
        repo = _make_repo(tmp_path / "repo")
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"layout": {"row_height": 10, "lane_width": 10}}))

        assert main([repo.workdir, "--config", str(settings)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["paths"][0]["d"] == "M 5 5 L 5 15"

    def test_max_count(self, tmp_path, capsys):
        repo = _make_repo(tmp_path / "repo")

        assert main([repo.workdir, "--max-count", "1", "--config", str(tmp_path / "s.json")]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["nodes"]) == 1
        assert data["paths"] == []

    def test_not_a_repository(self, tmp_path, capsys):
        status = main([str(tmp_path / "missing"), "--config", str(tmp_path / "settings.json")])

        assert status == 1
        assert "graphlane:" in capsys.readouterr().err

    def test_bad_settings(self, tmp_path, capsys):
        repo = _make_repo(tmp_path / "repo")
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"colors": {"palette": ["nope"]}}))

        assert main([repo.workdir, "--config", str(settings)]) == 1
        assert "Invalid palette color" in capsys.readouterr().err
