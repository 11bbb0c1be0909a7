import json

import pytest

import tour_ga.cli as cli


class TestRun:
    def test_run_builtin_instance(self, capsys):
        cli.main(["run", "--population-size", "10", "--generations", "5", "--seed", "1"])
        out = capsys.readouterr().out
        assert "instance colombia8: 8 cities" in out
        assert "best route:" in out
        assert "https://www.google.com/maps/dir/" in out

    def test_run_verbose_prints_generations(self, capsys):
        cli.main(["run", "--population-size", "6", "--generations", "3", "--seed", "2", "--verbose"])
        out = capsys.readouterr().out
        for gen in range(4):
            assert f"gen {gen}:" in out

    def test_run_json_instance_and_open(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "tri.json"
        payload = {"cities": ["A", "B", "C"], "matrix": [[0, 1, 2], [1, 0, 3], [2, 3, 0]], "optimum": 6}
        path.write_text(json.dumps(payload))
        opened = []
        monkeypatch.setattr(cli, "open_in_browser", lambda url: opened.append(url) or True)
        cli.main(["run", "--instance", str(path), "--population-size", "4", "--generations", "2", "--open"])
        out = capsys.readouterr().out
        # Every closed tour over three nodes costs 1 + 3 + 2.
        assert "length: 6" in out
        assert "known optimum: 6" in out
        assert len(opened) == 1
        assert opened[0].startswith("https://www.google.com/maps/dir/")

    def test_invalid_config_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["run", "--population-size", "0", "--generations", "1"])
        assert exc.value.code == 2
        assert "population_size" in capsys.readouterr().err

    def test_unparseable_json_instance_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit) as exc:
            cli.main(["run", "--instance", str(path), "--population-size", "4", "--generations", "1"])
        assert exc.value.code == 2
        assert "bad.json" in capsys.readouterr().err

    def test_non_numeric_optimum_exits(self, tmp_path):
        path = tmp_path / "tri.json"
        path.write_text(json.dumps({"matrix": [[0, 1, 2], [1, 0, 3], [2, 3, 0]], "optimum": "6"}))
        with pytest.raises(SystemExit) as exc:
            cli.main(["run", "--instance", str(path), "--population-size", "4", "--generations", "1"])
        assert exc.value.code == 2

    def test_missing_instance_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            cli.main(["run", "--instance", str(tmp_path / "missing.tsp")])
        assert exc.value.code == 2


class TestSweep:
    def test_sweep_shares_base_route(self, capsys):
        cli.main(["sweep", "--combo", "5:3", "--combo", "8:0", "--seed", "7"])
        out = capsys.readouterr().out
        assert out.count("base route:") == 1
        assert out.count("best route:") == 2
        assert "population_size=5 generations=3" in out
        assert "population_size=8 generations=0" in out

    def test_independent_sweep_has_no_base_route(self, capsys):
        cli.main(["sweep", "--combo", "5:2", "--init-policy", "independent-random", "--seed", "7"])
        out = capsys.readouterr().out
        assert "base route:" not in out
        assert out.count("best route:") == 1

    def test_bad_combo(self):
        with pytest.raises(SystemExit):
            cli.main(["sweep", "--combo", "ten"])
