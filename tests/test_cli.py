"""Tests for the analyse command line."""

import json

import pytest

from depviz.analyse import main


class TestAnalyseCli:
    """Tests for depviz.analyse.main."""

    def test_sample_without_export(self, capsys):
        main(["--sample", "--no-export"])
        out = capsys.readouterr().out
        assert "Loaded 13 nodes and 7 links." in out
        assert "Components: 6" in out
        assert "Isolated: 1" in out

    def test_search_and_selection(self, capsys):
        main(["--sample", "--no-export", "--search", "auth", "--select-node", "node_6", "--depth", "2"])
        out = capsys.readouterr().out
        assert "Search 'auth': 1 result(s)" in out
        assert "AuthService" in out
        assert "node_6 is connected to 2 node(s): node_0, node_2" in out
        assert "Within 2 hop(s): 3 node(s)" in out

    def test_select_link(self, capsys):
        main(["--sample", "--no-export", "--select-link", "node_5-node_10"])
        assert "connects: node_10, node_5" in capsys.readouterr().out

    def test_exports(self, tmp_path, dependency_json):
        graph_path = tmp_path / "graph.json"
        graph_path.write_text(json.dumps(dependency_json), encoding="utf-8")
        outdir = tmp_path / "analysis"

        main(["--input", str(graph_path), "--outdir", str(outdir)])

        for name in ("components.csv", "communities.csv", "membership.csv", "hubs.csv",
                     "insights.json", "graph.graphml", "report.md"):
            assert (outdir / name).exists(), name
        report = (outdir / "report.md").read_text(encoding="utf-8")
        assert report.startswith("# graph Dependency Graph Analysis")

    def test_filter(self, tmp_path, dependency_json, capsys):
        graph_path = tmp_path / "graph.json"
        graph_path.write_text(json.dumps(dependency_json), encoding="utf-8")
        main(["--input", str(graph_path), "--no-export", "--filter", "utils", "--exclude"])
        assert "2 nodes, 1 links remain." in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--input", str(tmp_path / "nope.json"), "--no-export"])

    def test_invalid_input(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"foo": 1}), encoding="utf-8")
        with pytest.raises(SystemExit, match="Invalid graph data format"):
            main(["--input", str(path), "--no-export"])
