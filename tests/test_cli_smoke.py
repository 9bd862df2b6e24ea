import json

from paretoswarm.cli import CONFIG_ERROR_EXIT, main


def test_problems_lists_registry(capsys):
    assert main(["problems"]) == 0
    out = capsys.readouterr().out
    assert "zdt2" in out and "binh_korn" in out


def test_run_writes_archive_snapshots(tmp_path, capsys):
    out_dir = tmp_path / "run"
    code = main(
        [
            "run",
            "--problem",
            "zdt2",
            "--n-var",
            "4",
            "--pop-size",
            "6",
            "--generations",
            "3",
            "--seed",
            "1",
            "--output-dir",
            str(out_dir),
        ]
    )
    assert code == 0
    for g in range(4):
        assert (out_dir / f"fitness{g}.csv").exists()
    resolved = json.loads((out_dir / "resolved_config.json").read_text())
    assert resolved["pop_size"] == 6 and resolved["problem"] == "zdt2"
    assert "3 generations" in capsys.readouterr().out


def test_run_from_config_file_with_flag_override(tmp_path):
    config = tmp_path / "run.json"
    config.write_text(json.dumps({"problem": "dtlz2", "n_var": 5, "pop_size": 5, "generations": 50, "seed": 3}))
    assert main(["run", "--config", str(config), "--generations", "2", "--evaluator", "threads", "--workers", "2"]) == 0


def test_unknown_problem_is_a_configuration_error(capsys):
    assert main(["run", "--problem", "zdt9", "--n-var", "4", "--pop-size", "5", "--generations", "1"]) == CONFIG_ERROR_EXIT
    assert "Unknown objective function" in capsys.readouterr().err


def test_invalid_parameter_is_a_configuration_error():
    assert main(["run", "--problem", "zdt2", "--n-var", "4", "--pop-size", "2", "--generations", "1"]) == CONFIG_ERROR_EXIT


def test_missing_problem_is_a_configuration_error():
    assert main(["run", "--pop-size", "5", "--generations", "1"]) == CONFIG_ERROR_EXIT


def test_missing_config_file_is_reported(tmp_path):
    assert main(["run", "--config", str(tmp_path / "absent.yaml")]) == CONFIG_ERROR_EXIT
