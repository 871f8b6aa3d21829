import pytest

from meandiff.cli import build_parser, main


class TestCLI:
    def test_run_defaults(self):
        args = build_parser().parse_args(["run"])
        assert args.size == 10_000
        assert args.seed == 42
        assert args.true_effect == 5.0

    def test_run_prints_report(self, capsys):
        assert main(["run", "--size", "1000", "--seed", "42"]) == 0
        out = capsys.readouterr().out
        assert "dataset size: 1000" in out
        assert "Estimated effect:" in out
        assert "True effect: 5.0000" in out
        assert "Execution time:" in out

    def test_run_empty_dataset(self, capsys):
        assert main(["run", "--size", "0"]) == 0
        assert "Estimated effect: 0.0000" in capsys.readouterr().out

    def test_negative_size_rejected(self):
        with pytest.raises(SystemExit) as exc:
            main(["run", "--size", "-5"])
        assert exc.value.code == 2

    def test_benchmark_prints_table(self, capsys):
        assert main(["benchmark", "--sizes", "10", "100"]) == 0
        out = capsys.readouterr().out
        assert "estimate" in out
        assert "elapsed" in out

    def test_bias_reports_expected_estimate(self, capsys):
        assert main(["bias", "--size", "500", "--trials", "3"]) == 0
        out = capsys.readouterr().out
        assert "Mean naive estimate:" in out
        assert "Expected estimate: 6.3654" in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
